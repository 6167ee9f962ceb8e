from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from loadgen.core.load import create_load

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
def generate_load(n: int = Query(100)):
    """
    Intentionally burn CPU for n * 100 iterations and report the run time.
    Unbounded: large n simply takes longer.
    """
    return create_load(n)
