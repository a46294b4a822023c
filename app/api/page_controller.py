"""
app/api/page_controller.py

Serves the upload page at GET /.

The page is a thin client of POST /upload and GET /files; its markup is not
part of the API contract.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Page"])

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
  body {{ font-family: -apple-system, "Segoe UI", Roboto, sans-serif; max-width: 800px;
         margin: 40px auto; padding: 0 20px; color: #333; }}
  #drop {{ border: 3px dashed #667eea; border-radius: 8px; padding: 48px 20px;
          text-align: center; background: #f8f9ff; }}
  #drop.over {{ background: #e8e9ff; }}
  .item {{ display: flex; justify-content: space-between; background: #f5f5f5;
          padding: 10px 14px; border-radius: 6px; margin-bottom: 8px; }}
  #status {{ margin: 16px 0; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div id="drop">
  <p>Drag &amp; drop files here, or</p>
  <input type="file" id="picker" multiple>
  <p><small>Maximum file size: {max_mb} MB</small></p>
</div>
<div id="status"></div>
<h2>Recently Uploaded</h2>
<div id="uploaded"></div>
<script>
const drop = document.getElementById("drop");
const statusEl = document.getElementById("status");

function formatSize(bytes) {{
  if (bytes === 0) return "0 Bytes";
  const units = ["Bytes", "KB", "MB", "GB"];
  const i = Math.floor(Math.log(bytes) / Math.log(1024));
  return Math.round(bytes / Math.pow(1024, i) * 100) / 100 + " " + units[i];
}}

async function loadFiles() {{
  const res = await fetch("/files");
  if (!res.ok) return;
  const files = await res.json();
  const list = document.getElementById("uploaded");
  list.replaceChildren(...files.map(f => {{
    const row = document.createElement("div");
    row.className = "item";
    const link = document.createElement("a");
    link.href = "/uploads/" + encodeURIComponent(f.name);
    link.textContent = f.name;
    const size = document.createElement("span");
    size.textContent = formatSize(f.size);
    row.append(link, size);
    return row;
  }}));
}}

async function upload(files) {{
  const form = new FormData();
  Array.from(files).forEach(f => form.append("files", f));
  const res = await fetch("/upload", {{ method: "POST", body: form }});
  const body = await res.json();
  statusEl.textContent = res.ok ? body.message : "Upload failed: " + body.error;
  loadFiles();
}}

drop.addEventListener("dragover", e => {{ e.preventDefault(); drop.classList.add("over"); }});
drop.addEventListener("dragleave", () => drop.classList.remove("over"));
drop.addEventListener("drop", e => {{
  e.preventDefault();
  drop.classList.remove("over");
  upload(e.dataTransfer.files);
}});
document.getElementById("picker").addEventListener("change", e => upload(e.target.files));
loadFiles();
</script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request) -> HTMLResponse:
    """Render the upload page."""
    settings = request.app.state.settings
    return HTMLResponse(
        _PAGE.format(
            title=settings.app_name,
            max_mb=settings.max_file_size // (1024 * 1024),
        )
    )
