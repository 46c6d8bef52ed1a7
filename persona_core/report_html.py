from __future__ import annotations
from html import escape
from typing import Any, Dict, List

from .profiles import display_rows
from .types import StoredResult

_LEVEL_TEXT = {"low": "Low", "medium": "Medium", "high": "High"}

DISCLAIMER = (
    "This report is a self-reflection aid, not a psychological diagnosis. "
    "Results describe tendencies at the time of the test."
)


def _as_dict(result: StoredResult | Dict[str, Any]) -> Dict[str, Any]:
    return result.to_dict() if isinstance(result, StoredResult) else dict(result)


def _row(r: Dict[str, Any]) -> str:
    note = r.get("note")
    note_txt = f"<br/><small>{escape(str(note))}</small>" if note else ""
    return (
        f"<tr><td>{escape(str(r['label']))}{note_txt}</td>"
        f"<td>{r['percent']}</td><td>{_LEVEL_TEXT[str(r['level'])]}</td></tr>"
    )


def render_report_html(result: StoredResult | Dict[str, Any], title: str = "Personality Report") -> str:
    d = _as_dict(result)
    code = str(d.get("typeCode", ""))
    name = d.get("typeName") or code
    desc = d.get("typeDescription") or ""
    created = str(d.get("createdAt", ""))[:10]
    rows = "\n".join(_row(r) for r in display_rows(d["scores"]))

    add_ons = d.get("addOns") or {}
    add_on_items: List[str] = []
    for key, label in (("stressKey", "Stress"), ("subtypeKey", "Subtype"), ("modeKey", "Mode")):
        if add_ons.get(key):
            add_on_items.append(f"<li><b>{label}</b>: {escape(str(add_ons[key]))}</li>")
    add_on_html = f"<h3>Add-ons</h3><ul>{''.join(add_on_items)}</ul>" if add_on_items else ""

    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<title>{escape(title)}</title>
<style>
 body{{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial}}
 .wrap{{max-width:960px;margin:40px auto;padding:0 16px}}
 h1{{margin:0 0 16px}}
 .type{{font-size:1.1rem;margin:8px 0 16px}}
 table{{border-collapse:collapse;width:100%}}
 th,td{{text-align:left}}
</style>
</head>
<body>
<div class="wrap">
  <h1>{escape(title)}</h1>
  <p>Generated {escape(created)}</p>
  <div class="type"><b>Your type:</b> {escape(str(name))} ({escape(code)})</div>
  <p>{escape(str(desc))}</p>

  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Trait</th><th>Score</th><th>Level</th></tr></thead>
    <tbody>{rows}</tbody>
  </table>

  <p><b>Profile clarity:</b> {float(d.get('stability', 0.0)):.1f}</p>
  {add_on_html}

  <p><i>{escape(DISCLAIMER)}</i></p>
</div>
</body>
</html>"""


def export_report_html(result: StoredResult | Dict[str, Any], path: str) -> str:
    html = render_report_html(result)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return path
