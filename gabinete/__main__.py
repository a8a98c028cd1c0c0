# gabinete/__main__.py
import uvicorn

from gabinete.infrastructure.config import get_settings
from gabinete.infrastructure.log import log


def main() -> None:
    settings = get_settings()
    log(f"Servidor rodando na porta {settings.port}")
    uvicorn.run("gabinete.interfaces.api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
