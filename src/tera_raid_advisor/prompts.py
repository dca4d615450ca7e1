"""
Prompt templates for the solo Tera Raid advisor.
"""

from .models import RaidQuery

SYSTEM_INSTRUCTION = """\
あなたはポケモンSVの「テラスタルレイド・ソロ攻略」の専門家です。
ユーザーが入力した【相手ポケモン】【テラスタイプ】【星のランク】に対し、1人で安定して勝てる対策を3体提案してください。

【回答ルール】
1. 指定された星の数に基づき、最適な「持ち物」「技」「立ち回り手順（チャート）」を出すこと。
2. 回復手段（かいがらのすず、ドレインパンチ、パラボラチャージ等）を重視すること。
3. JSON形式でのみ回答してください。

【JSON構造】
[
  {
    "名前": "ポケモン名",
    "もちもの": "おすすめの持ち物名",
    "理由": "なぜこのレイドに強いのか",
    "技": ["技1", "技2", "技3", "技4"],
    "チャート": ["1T目: 〇〇を使う", "2T目: △△で削る", "中盤: テラスタルして攻撃", "ピンチ時: 応援で回復"]
  }
]
"""

USER_PROMPT_TEMPLATE = (
    "相手ポケモン: {target_name}, テラスタイプ: {tera_type}, 難易度: {raid_rank}. "
    "このレイドをソロ攻略する対策を教えて。"
)


def build_user_prompt(query: RaidQuery) -> str:
    """Interpolate the three query fields into the per-request prompt."""
    return USER_PROMPT_TEMPLATE.format(
        target_name=query.target_name.strip(),
        tera_type=query.tera_type.value if query.tera_type else "",
        raid_rank=query.raid_rank.value,
    )
