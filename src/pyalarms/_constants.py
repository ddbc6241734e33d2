"""Internal constants shared across the library."""

BASE_URL = "https://online.gkstolica.ru"
UNITS_ENDPOINT = "/api/api.php"
DEFAULT_NODE = 5
USER_AGENT = "pyalarms"

#: Seconds between two scheduled fetch cycles.
DEFAULT_POLL_INTERVAL: float = 30.0

#: Sensor value the telemetry backend reports for an active alarm.
ACTIVE_VALUE = "вкл."

#: Shown in place of a missing vehicle registration number.
MISSING_PLATE_LABEL = "Без номера"

SUMMARY_TITLE = "Мониторинг неполадок"
DETAIL_TITLE = "Список транспортных средств"
DETAIL_TITLE_FORMAT = "Список ТС: {label}"

#: Watched sensor name -> display label, in summary order.
DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("EXT ТС в движении", "ТС в движении"),
    ("EXT Низкий уровень топлива", "Низкий уровень топлива"),
)
