from typing import Literal


existing_services = Literal[
    "repository",
    "alert",
    "action",
    "ingest_token",
    "parser",
    "user",
]
