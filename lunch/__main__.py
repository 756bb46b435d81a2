"""Run the API with uvicorn: `python -m lunch`."""

import uvicorn

from lunch.config import get_settings
from lunch.main import create_app


def main() -> None:
    uvicorn.run(create_app(settings=get_settings()), host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
