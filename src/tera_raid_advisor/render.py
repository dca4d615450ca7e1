"""Render the raid screen as plain Markdown text.

The form view lists the three inputs, open suggestions and picker; the
result view lists one card per recommendation, with only the expanded card
showing its rationale, moves and turn chart.
"""

from __future__ import annotations

from .models import RaidRank, Recommendation, TeraType
from .screen import Modal, RaidScreen, ScreenPhase

TYPE_PLACEHOLDER = "選択してください"


def render_screen(screen: RaidScreen) -> str:
    """Render whichever view the screen is currently in."""
    if screen.phase is ScreenPhase.RESULT:
        body = render_results(screen)
    else:
        body = render_form(screen)

    if screen.notification is not None:
        body = f"> **{screen.notification.title}**: {screen.notification.message}\n\n{body}"
    return body


def render_form(screen: RaidScreen) -> str:
    query = screen.query
    lines = [
        "# レイドソロ攻略検索",
        "",
        f"**出現ポケモン**: {query.target_name or 'ポケモンを入力してください。'}",
    ]
    for i, suggestion in enumerate(screen.suggestions):
        lines.append(f"  {i}. {suggestion.name}")

    tera_type = query.tera_type.value if query.tera_type else TYPE_PLACEHOLDER
    lines.append(f"**相手のテラスタイプ**: {tera_type}")
    lines.append(f"**レイド難易度**: {query.raid_rank.value}")
    lines.append("")
    lines.append("[検索中...]" if screen.phase is ScreenPhase.LOADING else "[検索]")

    if screen.modal is Modal.TERA_TYPE:
        lines += ["", "## テラスタイプを選択", " / ".join(t.value for t in TeraType)]
    elif screen.modal is Modal.RAID_RANK:
        lines += ["", "## 難易度を選択", " / ".join(r.value for r in RaidRank)]

    return "\n".join(lines)


def render_results(screen: RaidScreen) -> str:
    lines = ["← 再検索", "", f"## {screen.result_title}"]
    if not screen.recommendations:
        lines += ["", "(提案はありませんでした)"]
    for index, recommendation in enumerate(screen.recommendations):
        lines.append("")
        lines.append(render_card(index, recommendation, expanded=screen.expanded_index == index))
    return "\n".join(lines)


def render_card(index: int, recommendation: Recommendation, expanded: bool = False) -> str:
    """Render one card; collapsed cards show only the header."""
    toggle = "▲ 閉じる" if expanded else "▼ 攻略チャートを見る"
    lines = [
        f"### {index}. {recommendation.name}",
        f"持ち物: {recommendation.held_item}  ({toggle})",
    ]
    if not expanded:
        return "\n".join(lines)

    lines += ["", "■ 採用理由", recommendation.rationale, "", "■ おすすめ技構成"]
    lines.append(" / ".join(f"`{move}`" for move in recommendation.moves))
    lines += ["", "■ 立ち回りチャート"]
    lines += [f"- {step}" for step in recommendation.plan]
    return "\n".join(lines)
