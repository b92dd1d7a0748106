from roomair import Quantity

Q_ = Quantity


g = Q_(9.81, 'm / s**2')


def archimedes_number(
    d_o: Quantity,
    U_o: Quantity,
    T_r: Quantity,
    T_o: Quantity,
    g: Quantity = g,
    dT_min: Quantity = Q_(0.1, 'K')
) -> float:
    """Dimensionless number that represents the ratio of the buoyancy force to
    the inertia force acting on a unit volume of an air jet at the supply
    outlet.

    Parameters
    ----------
    d_o:
        Reference diameter of the supply opening.
    U_o:
        Average supply air velocity at the outlet.
    T_r:
        Room air temperature.
    T_o:
        Supply air temperature.
    g:
        Gravitational acceleration.
    dT_min:
        Temperature differences smaller than or equal to this value are
        regarded as isothermal (Ar = 0).
    """
    T_r = T_r.to('K')
    dT = abs((T_r - T_o.to('K')).to('K'))
    if dT <= dT_min:
        return 0.0
    Ar = g * dT * d_o / (T_r * U_o ** 2)
    return Ar.to('dimensionless').magnitude


def detachment_point(throw_coanda: Quantity, Ar: float) -> Quantity:
    """Returns the distance from the terminal where a cold jet attached to the
    ceiling breaks away, limited to the throw of the attached jet.
    """
    x_sep = 0.5 * throw_coanda / (Ar ** 0.5)
    if x_sep > throw_coanda:
        return throw_coanda
    return x_sep
