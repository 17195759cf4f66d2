from __future__ import annotations

import html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

SITE_TITLE = "Product Intelligence"
SITE_DESCRIPTION = "AI-powered product search platform"


def _base_html(title: str, description: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{html.escape(title)}</title>
  <meta name="description" content="{html.escape(description)}" />
</head>
<body>
  {body}
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
def home():
    body = f"""
  <main style="padding: 2rem; font-family: sans-serif">
    <h1>Welcome to {html.escape(SITE_TITLE)}</h1>
    <p>Search products, compare prices, and see AI-generated summaries.</p>
  </main>
    """
    return HTMLResponse(_base_html(SITE_TITLE, SITE_DESCRIPTION, body))
