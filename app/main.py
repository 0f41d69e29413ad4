from dotenv import load_dotenv


from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.api_v1 import router as api_v1
from app.core.config import settings
from app.core.errors import IncompleteInputError, PreconditionError
from app.core.lifespan import lifespan
from app.core.logging import get_logger
from app.web.router import router as web_router

load_dotenv()  # Load .env variables into os.environ for libraries (LangSmith, etc.)

logger = get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


@app.exception_handler(IncompleteInputError)
@app.exception_handler(PreconditionError)
async def change_input_error_handler(_request: Request, exc: Exception):
    """Caller-contract violations are client errors, never retried."""
    logger.warning("%s: %s", type(exc).__name__, exc)
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


app.include_router(api_v1)
app.include_router(web_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
