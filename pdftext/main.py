import uvicorn
from mangum import Mangum

from pdftext.api.app import create_app

app = create_app()

# AWS Lambda / API Gateway entry point.
handler = Mangum(app, lifespan="off")


def main() -> None:
    """Entry point: load settings -> build extractor -> serve HTTP locally."""
    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
