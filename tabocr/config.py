import json
import os
from dataclasses import dataclass
from typing import Optional

import pytesseract

# tessdata location of the Ubuntu tesseract-ocr 4.00 package
DEFAULT_DATA_PATH = "/usr/share/tesseract-ocr/4.00/tessdata/"
DEFAULT_LANGUAGE = "eng"

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
DEPENDENCIES_PATH = os.path.join(PROJECT_ROOT, "config", "dependencies.json")


@dataclass
class Dependencies:
    data_path: str = DEFAULT_DATA_PATH
    language: str = DEFAULT_LANGUAGE
    tesseract_cmd: Optional[str] = None


def _resolve_path(base: str, relative: str) -> str:
    return os.path.abspath(os.path.join(base, relative))


def configure_dependencies(deps_path: Optional[str] = None, project_root: Optional[str] = None) -> Dependencies:
    """Configure Tesseract from config/dependencies.json and return the OCR defaults.

    Recognised keys: ``tesseract_path``, ``tessdata_path`` (both relative to
    the project root unless absolute) and ``language``.
    """
    project_root = project_root or PROJECT_ROOT
    deps_path = deps_path or DEPENDENCIES_PATH
    result = Dependencies()

    if not os.path.exists(deps_path):
        print(f"Warning: dependencies.json not found at {deps_path}")
        return result

    try:
        with open(deps_path, "r", encoding="utf-8") as deps_file:
            deps = json.load(deps_file) or {}

        tess_rel = deps.get("tesseract_path")
        if tess_rel:
            tess_abs = _resolve_path(project_root, tess_rel)
            if os.path.exists(tess_abs):
                pytesseract.pytesseract.tesseract_cmd = tess_abs
                result.tesseract_cmd = tess_abs
            else:
                print(f"Warning: Tesseract path from config does not exist: {tess_abs}")

        data_rel = deps.get("tessdata_path")
        if data_rel:
            candidate = _resolve_path(project_root, data_rel)
            if os.path.isdir(candidate):
                result.data_path = candidate
            else:
                print(f"Warning: tessdata path from config does not exist or is not a directory: {candidate}")

        language = deps.get("language")
        if language:
            result.language = str(language)

    except (OSError, ValueError, AttributeError) as exc:
        print(f"Warning: Could not load dependencies from {deps_path}: {exc}")

    return result
