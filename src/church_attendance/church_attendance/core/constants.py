"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CHART_RECENT_LIMIT = 8
DEFAULT_CHURCH_NAME = "Igreja Novo Tempo em Células"

CSV_DELIMITER = ";"
CSV_ENCODING = "utf-8-sig"
CSV_BASE_FILENAME = "frequencia_igreja"
CSV_HEADERS = [
    "Data",
    "Homens Membros",
    "Homens Visitantes",
    "Mulheres Membros",
    "Mulheres Visitantes",
    "Crianças",
    "Bebês",
    "Total",
]

# Field order shared by forms, CSV rows and the JSON API.
COUNT_FIELDS = (
    "homens",
    "homens_visitantes",
    "mulheres",
    "mulheres_visitantes",
    "kids",
    "baby",
)

MONTH_NAMES_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

WEEKDAY_NAMES_PT = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)
