import re
from pathlib import Path
from typing import Dict, List

from converters import xml_to_view, view_to_xml
from xmlview import view_to_html, view_to_markdown


def safe_filename(name: str) -> str:
    """
    Convert a document name into a safe file name
    without special chars for OS display.
    """
    if not name:
        return "unnamed"

    name = name.strip()
    name = re.sub(r'[\\/:*?"<>|]', "_", name)
    name = re.sub(r"\s+", " ", name)
    return name


def export_document(
    xml: str,
    output_dir: Path,
    name: str,
    formats: List[str],
) -> Dict[str, Path]:
    """
    Load the document into a view tree once, then save it in every
    requested format. Returns the written path per format.
    """
    view = xml_to_view(xml)

    renderers = {
        "xml": (".xml", view_to_xml),
        "html": (".html", view_to_html),
        "md": (".md", view_to_markdown),
    }

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    base_name = safe_filename(name)

    written: Dict[str, Path] = {}
    for fmt in formats:
        if fmt not in renderers:
            print(f"Skipping unknown export format {fmt!r}")
            continue
        suffix, render = renderers[fmt]
        file_path = output_dir / f"{base_name}{suffix}"
        text = render(view)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"  -> saved {fmt} to {file_path}")
        written[fmt] = file_path

    return written
