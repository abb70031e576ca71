"""Internal constants shared across the library."""

BASE_URL = "https://jsonplaceholder.typicode.com"
TODOS_PATH = "/todos"
USER_AGENT = "memstore/0 (+aiohttp)"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_ID_FIELD = "id"
