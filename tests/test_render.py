"""
Tests for plain-text rendering of the search screen.
"""

import pytest

from tera_raid_advisor.advisor import RaidAdvisor
from tera_raid_advisor.llm_client import MockLLMClient
from tera_raid_advisor.matcher import ReferenceTable
from tera_raid_advisor.models import Recommendation, TeraType
from tera_raid_advisor.render import render_card, render_screen
from tera_raid_advisor.screen import Modal, RaidScreen


@pytest.fixture
def recommendation() -> Recommendation:
    return Recommendation(
        name="ハラバリー",
        held_item="かいがらのすず",
        rationale="パラボラチャージで回復しながら戦える",
        moves=["パラボラチャージ", "じゅうでん", "10まんボルト", "ボルトチェンジ"],
        plan=["1T目: じゅうでん", "2T目以降: パラボラチャージ"],
    )


def test_collapsed_card_shows_header_only(recommendation: Recommendation) -> None:
    text = render_card(0, recommendation)
    assert "ハラバリー" in text
    assert "持ち物: かいがらのすず" in text
    assert "▼ 攻略チャートを見る" in text
    assert "■ 採用理由" not in text


def test_expanded_card_shows_sections_in_order(recommendation: Recommendation) -> None:
    text = render_card(0, recommendation, expanded=True)
    assert "▲ 閉じる" in text
    assert text.index("■ 採用理由") < text.index("■ おすすめ技構成") < text.index("■ 立ち回りチャート")
    assert text.index("パラボラチャージ`") < text.index("じゅうでん`")
    assert text.index("- 1T目: じゅうでん") < text.index("- 2T目以降: パラボラチャージ")


def test_form_placeholders(small_table: ReferenceTable) -> None:
    screen = RaidScreen(RaidAdvisor(llm_client=MockLLMClient()), reference_table=small_table)
    text = render_screen(screen)
    assert "レイドソロ攻略検索" in text
    assert "選択してください" in text
    assert "**レイド難易度**: ★6" in text
    assert "[検索]" in text


def test_form_lists_suggestions_and_picker(small_table: ReferenceTable) -> None:
    screen = RaidScreen(RaidAdvisor(llm_client=MockLLMClient()), reference_table=small_table)
    screen.set_target_name("ぴか")
    screen.open_modal(Modal.TERA_TYPE)

    text = render_screen(screen)

    assert "0. ピカチュウ" in text
    assert "1. ズピカ" in text
    assert "## テラスタイプを選択" in text
    assert "フェアリー" in text


@pytest.mark.anyio
async def test_result_view(small_table: ReferenceTable, sample_reply: str) -> None:
    screen = RaidScreen(
        RaidAdvisor(llm_client=MockLLMClient(responses=[sample_reply])),
        reference_table=small_table,
    )
    screen.set_target_name("ピカチュウ")
    screen.select_tera_type(TeraType.WATER)
    await screen.submit()
    screen.toggle_card(1)

    text = render_screen(screen)

    assert "← 再検索" in text
    assert "【★6 ソロ攻略】対 ピカチュウ (みず)" in text
    assert text.count("▼ 攻略チャートを見る") == 2
    assert text.count("▲ 閉じる") == 1
    assert "パラボラチャージで回復しながら戦える" in text
    assert "でんき技を無効化" not in text


@pytest.mark.anyio
async def test_failure_notification_is_rendered(small_table: ReferenceTable) -> None:
    screen = RaidScreen(
        RaidAdvisor(llm_client=MockLLMClient(responses=["no array"])),
        reference_table=small_table,
    )
    screen.set_target_name("ピカチュウ")
    screen.select_tera_type(TeraType.WATER)
    await screen.submit()

    text = render_screen(screen)
    assert text.startswith("> **エラー**: AIからの回答を取得できませんでした。")
