"""FastAPI web service for rendering markup to text fragments.

Endpoints::

    GET  /              Web UI (single-page HTML).
    POST /render        Send markup as JSON, receive fragments back.
    POST /render/file   Upload an HTML or Markdown file, receive fragments.
    GET  /health        Health check.
    GET  /styles        List available style presets.

Run::

    uvicorn htmlruns.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from typing import Any, Union

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from htmlruns import __version__
from htmlruns.converter import Converter
from htmlruns.fragments import Fragment, to_data, to_plain_text
from htmlruns.renderer import DEFAULT_FONT_SIZE
from htmlruns.style_manager import StyleManager

app = FastAPI(
    title="htmlruns",
    description="HTML to styled text run rendering service",
    version=__version__,
)

_INDEX_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>htmlruns</title></head>
<body>
<h1>htmlruns</h1>
<textarea id="markup" rows="12" cols="80">&lt;p&gt;Hello &lt;b&gt;world&lt;/b&gt;&lt;/p&gt;</textarea>
<p>
<select id="style">%(options)s</select>
<select id="source"><option>html</option><option>markdown</option></select>
<button id="render">Render</button>
</p>
<pre id="result"></pre>
<script>
document.getElementById("render").addEventListener("click", async () => {
  const resp = await fetch("/render", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({
      markup: document.getElementById("markup").value,
      style: document.getElementById("style").value,
      source: document.getElementById("source").value,
    }),
  });
  document.getElementById("result").textContent =
    JSON.stringify(await resp.json(), null, 2);
});
</script>
</body>
</html>
"""


class RenderRequest(BaseModel):
    markup: str
    style: str = "default"
    source: str = "html"
    base_font_size: float = Field(DEFAULT_FONT_SIZE, gt=0)


def _render(markup: str, style: str, source: str, base_font_size: Union[int, float]) -> dict[str, Any]:
    """Render with links disabled; configuration errors become HTTP 400."""
    try:
        converter = Converter(
            style_preset=style,
            base_font_size=base_font_size,
            source=source,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    fragments: list[Fragment] = converter.convert_text(markup)
    return {"fragments": to_data(fragments), "text": to_plain_text(fragments)}


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the web UI."""
    options = "".join(f"<option>{name}</option>" for name in StyleManager.PRESETS)
    return HTMLResponse(content=_INDEX_HTML % {"options": options})


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, list[str]]:
    """List available style presets."""
    return {"presets": StyleManager.PRESETS}


@app.post("/render")
async def render(request: RenderRequest) -> dict[str, Any]:
    """Render markup sent as JSON.

    - **markup**: HTML or Markdown source text
    - **style**: Style preset name (plain, default, compact)
    - **source**: ``html`` or ``markdown``
    - **base_font_size**: Size that ``em`` units resolve against
    """
    return _render(request.markup, request.style, request.source, request.base_font_size)


@app.post("/render/file")
async def render_file(
    file: UploadFile = File(...),
    style: str = Form("default"),
    source: str = Form("html"),
    encoding: str = Form("utf-8"),
) -> dict[str, Any]:
    """Upload a markup file and receive its fragments.

    - **file**: HTML or Markdown file
    - **style**: Style preset name
    - **source**: ``html`` or ``markdown``
    - **encoding**: Source file encoding
    """
    raw = await file.read()
    try:
        markup = raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return _render(markup, style, source, DEFAULT_FONT_SIZE)
