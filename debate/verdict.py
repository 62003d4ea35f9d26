"""裁決擷取規則"""

from __future__ import annotations

import re

from .models import Verdict

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def extract_verdict(content: str, round: int) -> Verdict:
    """以內容第一行（去除空白）作為勝方，完整內容作為理由

    不限制勝方必須是 pro/con/inconclusive，任何字串皆原樣接受。
    """
    first_line = _LINE_BREAK_RE.split(content, maxsplit=1)[0]
    return Verdict(winner=first_line.strip(), rationale=content, round=round)


__all__ = ["extract_verdict"]
