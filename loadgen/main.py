from fastapi import FastAPI

from loadgen import __version__
from loadgen.routers import load

app = FastAPI(title="loadgen", version=__version__)

# Routers
app.include_router(load.router)
