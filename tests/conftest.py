"""
Pytest configuration and fixtures for tera-raid-advisor tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing tera_raid_advisor
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tera_raid_advisor.matcher import ReferenceTable
from tera_raid_advisor.models import ReferenceEntity


SAMPLE_REPLY = """了解しました。ソロ攻略の対策は以下の通りです。

```json
[
  {
    "名前": "ドオー",
    "もちもの": "たべのこし",
    "理由": "でんき技を無効化でき、じこさいせいで粘れる",
    "技": ["じしん", "じこさいせい", "どくびし", "あくび"],
    "チャート": ["1T目: どくびしを使う", "2T目: じしんで削る", "中盤: テラスタルして攻撃", "ピンチ時: じこさいせいで回復"]
  },
  {
    "名前": "ハラバリー",
    "もちもの": "かいがらのすず",
    "理由": "パラボラチャージで回復しながら戦える",
    "技": ["パラボラチャージ", "じゅうでん", "10まんボルト", "ボルトチェンジ"],
    "チャート": ["1T目: じゅうでん", "2T目以降: パラボラチャージ"]
  },
  {
    "名前": "ヘイラッシャ",
    "もちもの": "オボンのみ",
    "理由": "高い耐久で安定する",
    "技": ["ウェーブタックル", "のろい", "ねむる", "ねごと"],
    "チャート": ["1T目: のろい", "2T目: のろい", "中盤: ウェーブタックル"]
  }
]
```

健闘を祈ります！
"""


# Configure anyio to only use asyncio (not trio)
@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_reply() -> str:
    """A model reply with a three-entry JSON array wrapped in prose."""
    return SAMPLE_REPLY


@pytest.fixture
def small_table() -> ReferenceTable:
    """A short reference table with a predictable order."""
    names = [
        "ピカチュウ",
        "ライチュウ",
        "ピチュー",
        "ズピカ",
        "パモ",
        "パモット",
        "パーモット",
    ]
    return ReferenceTable([ReferenceEntity(name=n) for n in names])
