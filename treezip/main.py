# treezip/main.py
from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.concurrency import run_in_threadpool
from pathlib import Path
import logging

from .config import Settings, load_settings
from .log import LoggingConfig, configure_logging
from .pipeline import ScaffoldState, materialize, parse

configure_logging(LoggingConfig(level=load_settings().log_level))
logger = logging.getLogger(__name__)

app = FastAPI(title="Tree to Files")

# paths relative to this file
ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = ROOT / "templates"
STATIC_DIR = ROOT / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# latest parse result, replaced wholesale on every parse
app.state.scaffold = ScaffoldState()


def get_settings() -> Settings:
    return load_settings()


def _parse_or_400(request: Request, tree: str, settings: Settings) -> ScaffoldState:
    state = parse(tree, settings)
    request.app.state.scaffold = state
    if state.error is not None:
        raise HTTPException(status_code=400, detail=state.error.to_dict())
    return state


def _zip_response(data: bytes, settings: Settings) -> Response:
    return Response(
        content=data,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{settings.archive_name}"'},
    )


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, settings: Settings = Depends(get_settings)):
    return templates.TemplateResponse(request, "index.html", {"archive_name": settings.archive_name})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/preview")
async def preview(request: Request, tree: str = Form(""), settings: Settings = Depends(get_settings)):
    state = _parse_or_400(request, tree, settings)
    return state.preview()


@app.post("/generate")
async def generate(request: Request, tree: str = Form(""), settings: Settings = Depends(get_settings)):
    state = _parse_or_400(request, tree, settings)
    # compression runs off the event loop
    data = await run_in_threadpool(materialize, state, settings)
    logger.info("Generated %s for %d files", settings.archive_name, state.tree.count_files())
    return _zip_response(data, settings)


@app.get("/download")
async def download(request: Request, settings: Settings = Depends(get_settings)):
    state = request.app.state.scaffold
    if not state.ok:
        raise HTTPException(status_code=404, detail="No valid tree has been parsed yet")
    data = await run_in_threadpool(materialize, state, settings)
    return _zip_response(data, settings)
