from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialmedia.middleware import RateLimit
from socialmedia.routers import get_routers
from socialmedia.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()


# ================================================================================
#       FastAPI Setup
# ================================================================================
def create_app(rate_limit: bool = config.network.rate_limit.enabled) -> FastAPI:
    app = FastAPI(title=config.general.title.splitlines()[0])

    for router in get_routers():
        app.include_router(router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if rate_limit:
        app.add_middleware(RateLimit)

    return app


app = create_app()


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info("Starting social media server on %s:%s", config.network.host, config.network.port)


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "socialmedia.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
