from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from nzfcc import __version__
from nzfcc.api.routes import router as api_router

# Load environment variables from .env file in the working directory
load_dotenv(Path.cwd() / ".env")

app = FastAPI(title="NZFCC API", version=__version__)

app.include_router(api_router)
