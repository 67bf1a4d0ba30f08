APP_NAME = "radixtool"
APP_TITLE = "Radix Calculator"

__version__ = "0.3.0"


def version_text() -> str:
    return f"{APP_NAME} {__version__}"
