import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from todo_api.core import config
from todo_api.core.validation import validation_exception_handler
from todo_api.database import Base, engine
from todo_api.models import task, user  # noqa: F401
from todo_api.routes import auth_routes, task_routes, user_routes

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


def initialize_database() -> None:
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # ConfigurationError propagates and aborts startup before any request is served.
    settings = config.get_auth_settings()
    logger.info('Tokens expire after %s', settings.jwt_expires_in)
    initialize_database()
    yield


app = FastAPI(title='To-do API', lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.get('/')
def root():
    return {'status': 'To-do API Running'}


app.include_router(auth_routes.router, prefix='/auth')
app.include_router(user_routes.router, prefix='/users')
app.include_router(task_routes.router, prefix='/tasks')
