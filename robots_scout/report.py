# robots_scout/report.py

"""
Генерация JSON-отчёта с результатами проверки путей.
"""
import json
from pathlib import Path
from typing import Any, List


def render_json(results: List[dict[str, Any]], output_path: Path | str) -> Path:
    """
    Сохраняет результаты проверки в формате JSON по указанному пути.

    :param results: список словарей ``{"path", "allowed", "rule"}``
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(results, f, ensure_ascii=False, indent=2)

    return output
