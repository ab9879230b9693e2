"""Drag-and-drop page for converting exports in the browser."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def drop_page() -> HTMLResponse:
    """Page that converts dropped export files and offers copy buttons."""
    return HTMLResponse(_DROP_PAGE_HTML)


_DROP_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Fitness Export</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      #drop {
        border: 2px dashed #999; border-radius: 8px; padding: 2rem;
        text-align: center; margin-bottom: 1rem;
      }
      #drop.over { background: #eef; }
      .result { margin-bottom: 1.5rem; }
      .error { color: #b00; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Fitness Export</h1>
    <div id="drop">Drop Nutrition, Measurement or Exercise CSV exports here</div>
    <div id="results"></div>
    <script>
      const drop = document.getElementById('drop');
      const results = document.getElementById('results');

      drop.addEventListener('dragover', (event) => {
        event.preventDefault();
        drop.classList.add('over');
      });
      drop.addEventListener('dragleave', () => drop.classList.remove('over'));
      drop.addEventListener('drop', (event) => {
        event.preventDefault();
        drop.classList.remove('over');
        for (const file of event.dataTransfer.files) {
          convertFile(file);
        }
      });

      async function convertFile(file) {
        const body = new FormData();
        body.append('files', file);
        let result;
        try {
          const res = await fetch('/convert', { method: 'POST', body });
          if (!res.ok) {
            result = { filename: file.name, output: '', error: 'HTTP ' + res.status };
          } else {
            result = (await res.json()).results[0];
          }
        } catch (err) {
          result = { filename: file.name, output: '', error: String(err) };
        }
        showResult(result);
      }

      function showResult(result) {
        const block = document.createElement('div');
        block.className = 'result';
        const title = document.createElement('h3');
        title.textContent = result.filename + (result.kind ? ' (' + result.kind + ')' : '');
        block.appendChild(title);
        if (result.error) {
          const error = document.createElement('p');
          error.className = 'error';
          error.textContent = result.error;
          block.appendChild(error);
        } else {
          const copy = document.createElement('button');
          copy.textContent = 'Copy';
          copy.onclick = () => navigator.clipboard.writeText(result.output);
          block.appendChild(copy);
          const preview = document.createElement('pre');
          preview.textContent = result.output || '(no output)';
          block.appendChild(preview);
        }
        results.appendChild(block);
      }
    </script>
  </body>
</html>
"""
