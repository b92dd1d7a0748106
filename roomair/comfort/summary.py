from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.logging import ModuleLogger
from .evaluation import ComfortResult, ComfortCategory

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)


LABELS = {
    'de': {
        ComfortCategory.I: 'Kategorie I: Hoher Komfort',
        ComfortCategory.II: 'Kategorie II: Normaler Komfort',
        ComfortCategory.III: 'Kategorie III: Akzeptabler Komfort',
        ComfortCategory.FAIL: 'Nicht konform: Grenzwerte überschritten'
    },
    'en': {
        ComfortCategory.I: 'Category I: High Comfort',
        ComfortCategory.II: 'Category II: Normal Comfort',
        ComfortCategory.III: 'Category III: Acceptable Comfort',
        ComfortCategory.FAIL: 'Non-compliant: Limits exceeded'
    }
}

MESSAGES = {
    'de': {
        'velocity': (
            'Luftgeschwindigkeit in der Aufenthaltszone unter {v_max:.2f} m/s reduzieren '
            '(Volumenstrom verringern oder Auslasstyp anpassen).'
        ),
        'draught': (
            'Zugluftrate {DR:.1f}% überschreitet {DR_max:g}%: Zulufttemperatur '
            'erhöhen oder Auslässe umpositionieren.'
        ),
        'sound': (
            'Schallpegel überschreitet Grenzwert um {dL:.1f} dB(A): größere '
            'Auslässe mit niedrigerer Geschwindigkeit verwenden.'
        ),
        'ok': 'Alle Komfortkriterien erfüllt.'
    },
    'en': {
        'velocity': (
            'Reduce air velocity in occupied zone below {v_max:.2f} m/s '
            '(lower volume flow or adjust outlet type).'
        ),
        'draught': (
            'Draught rate {DR:.1f}% exceeds {DR_max:g}%: increase supply temperature '
            'or reposition outlets.'
        ),
        'sound': (
            'Sound level exceeds limit by {dL:.1f} dB(A): use larger outlets '
            'with lower velocity.'
        ),
        'ok': 'All comfort criteria met.'
    }
}


def get_comfort_summary(
    result: ComfortResult,
    lang: str = 'de',
    settings: Settings | None = None
) -> dict[str, str | list[str]]:
    """Returns a readable summary of the comfort evaluation.

    Parameters
    ----------
    result:
        Result of `evaluate_comfort()`.
    lang: {'de', 'en'}
        Language of the summary. Other languages fall back to German.
    settings: optional
        Constants of the room air model. Must be the same settings that were
        passed to `evaluate_comfort()`. The velocity limit of category II
        and the draught rate limit trigger the recommendations.

    Returns
    -------
    Dictionary with keys:
    - 'category_label': designation of the overall comfort category
    - 'recommendations': list of recommendations to improve the comfort, or a
      single message that all criteria are met
    """
    settings = settings or DEFAULT_SETTINGS
    if lang not in LABELS:
        logger.debug(f"No comfort summary available in '{lang}': using 'de'.")
        lang = 'de'
    messages = MESSAGES[lang]
    v = result.v_occ_max.to('m / s').m
    v_max = settings.v_limits[1].to('m / s').m
    DR = result.draught_rate.to('pct').m
    DR_max = settings.DR_max.to('pct').m
    recommendations = []
    if v > v_max:
        recommendations.append(messages['velocity'].format(v_max=v_max))
    if DR > DR_max:
        recommendations.append(messages['draught'].format(DR=DR, DR_max=DR_max))
    if not result.sound_compliant:
        recommendations.append(messages['sound'].format(dL=abs(result.sound_margin)))
    if not recommendations:
        recommendations.append(messages['ok'])
    return {
        'category_label': LABELS[lang][result.overall_category],
        'recommendations': recommendations
    }
