"""Write the OpenAPI schema and an installable bookmarklet page to docs/."""

import json
import sys
from pathlib import Path

import yaml
from jinja2 import Environment

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api import app  # noqa: E402
from config import settings  # noqa: E402
from services.import_pipeline import SUPPORTED_STORES  # noqa: E402
from services.scrapers import generate_versioned_bookmarklet, get_store_instructions  # noqa: E402

BOOKMARKLETS_PAGE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>{{ app_name }} bookmarklets</title></head>
<body>
<h1>{{ app_name }} import bookmarklets (v{{ version }})</h1>
{% for store in stores %}
<section>
  <h2>{{ store.logo }} {{ store.name }}{% if not store.enabled %} (coming soon){% endif %}</h2>
  {% if store.enabled %}<p><a href="{{ store.code }}">{{ app_name }} - {{ store.name }}</a></p>{% endif %}
  <ol>{% for step in store.steps %}<li>{{ step }}</li>{% endfor %}</ol>
  {% if store.tips %}<ul>{% for tip in store.tips %}<li>{{ tip }}</li>{% endfor %}</ul>{% endif %}
</section>
{% endfor %}
</body>
</html>
"""


def write_openapi(docs_dir: Path) -> None:
    openapi_schema = app.openapi()

    yaml_path = docs_dir / "swagger.yaml"
    json_path = docs_dir / "openapi.json"

    with open(yaml_path, "w") as f:
        yaml.dump(openapi_schema, f, sort_keys=False, default_flow_style=False)

    with open(json_path, "w") as f:
        json.dump(openapi_schema, f, indent=2)

    print(f"   - {yaml_path}")
    print(f"   - {json_path}")


def write_bookmarklets(docs_dir: Path) -> None:
    stores = []
    for store in SUPPORTED_STORES.values():
        instructions = get_store_instructions(store.id)
        stores.append({
            "name": store.name,
            "logo": store.logo,
            "enabled": store.enabled,
            "code": generate_versioned_bookmarklet(store.id).code,
            "steps": instructions.steps,
            "tips": instructions.tips,
        })

    env = Environment(autoescape=True)
    html = env.from_string(BOOKMARKLETS_PAGE).render(
        app_name=settings.app_name,
        version=settings.scraper_version,
        stores=stores,
    )
    html_path = docs_dir / "bookmarklets.html"
    html_path.write_text(html, encoding="utf-8")
    print(f"   - {html_path}")


if __name__ == "__main__":
    docs_dir = Path(__file__).parent.parent / "docs"
    docs_dir.mkdir(exist_ok=True)

    print("Generated documentation:")
    write_openapi(docs_dir)
    write_bookmarklets(docs_dir)
