"""
State model of the single search screen.

The screen is either showing the form, waiting on the advisor, or showing
result cards. Modal pickers, autocomplete suggestions and the one expanded
card are tracked here too, so the whole flow is testable without a
rendering layer.
"""

import logging
from enum import Enum

from pydantic import BaseModel

from .advisor import RaidAdvisor
from .exceptions import ValidationError
from .matcher import DEFAULT_SUGGESTION_LIMIT, ReferenceTable, load_reference_table
from .models import RaidQuery, RaidRank, Recommendation, ReferenceEntity, TeraType

logger = logging.getLogger("tera-raid-advisor")


class ScreenPhase(str, Enum):
    """Which view the screen is in."""
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"


class Modal(str, Enum):
    """Picker dialog currently open over the form."""
    NONE = "none"
    TERA_TYPE = "tera_type"
    RAID_RANK = "raid_rank"


class Notification(BaseModel):
    """A one-off alert shown to the user."""
    title: str
    message: str


VALIDATION_NOTICE = Notification(title="確認", message="相手の情報を入力してください")
FAILURE_NOTICE = Notification(title="エラー", message="AIからの回答を取得できませんでした。")


class RaidScreen:
    """Form → loading → result state machine for one user.

    At most one request is in flight: ``submit`` is refused while the screen
    is loading. A failed request leaves nothing behind except a notification.

    Example:
        >>> screen = RaidScreen(RaidAdvisor(llm_client=mock))
        >>> screen.set_target_name("ぴか")
        >>> [s.name for s in screen.suggestions]
        ['ピカチュウ', 'ズピカ']
        >>> screen.choose_suggestion(0)
        >>> screen.select_tera_type(TeraType.WATER)
        >>> await screen.submit()
        True
        >>> screen.phase
        <ScreenPhase.RESULT: 'result'>
    """

    def __init__(
        self,
        advisor: RaidAdvisor,
        reference_table: ReferenceTable | None = None,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> None:
        self.advisor = advisor
        self.reference_table = reference_table if reference_table is not None else load_reference_table()
        self.suggestion_limit = suggestion_limit

        self.phase = ScreenPhase.IDLE
        self.modal = Modal.NONE
        self.query = RaidQuery()
        self.suggestions: list[ReferenceEntity] = []
        self.notification: Notification | None = None

        self.submitted_query: RaidQuery | None = None
        self.recommendations: list[Recommendation] = []
        self.expanded_index: int | None = None

    @property
    def submit_enabled(self) -> bool:
        return self.phase is not ScreenPhase.LOADING

    @property
    def result_title(self) -> str:
        """Heading of the result view, e.g. 【★6 ソロ攻略】対 ピカチュウ (みず)."""
        query = self.submitted_query or self.query
        tera_type = query.tera_type.value if query.tera_type else ""
        return f"【{query.raid_rank.value} ソロ攻略】対 {query.target_name} ({tera_type})"

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def set_target_name(self, text: str) -> None:
        """Update the opponent name and refresh autocomplete."""
        self.query.target_name = text
        self.suggestions = self.reference_table.suggest(text, limit=self.suggestion_limit)

    def choose_suggestion(self, index: int) -> None:
        """Copy a suggested name into the form and close the list.

        Raises:
            IndexError: If no suggestion exists at ``index``
        """
        if not 0 <= index < len(self.suggestions):
            raise IndexError(f"No suggestion at position {index}")
        self.query.target_name = self.suggestions[index].name
        self.suggestions = []

    def open_modal(self, modal: Modal) -> None:
        self.modal = Modal(modal)

    def close_modal(self) -> None:
        self.modal = Modal.NONE

    def select_tera_type(self, tera_type: TeraType | str) -> None:
        """Pick a Tera type from the fixed list and close the picker.

        Raises:
            ValueError: If the value is not one of the 18 Tera types
        """
        self.query.tera_type = TeraType(tera_type)
        self.close_modal()

    def select_raid_rank(self, raid_rank: RaidRank | str) -> None:
        """Pick a star rank from the fixed list and close the picker.

        Raises:
            ValueError: If the value is not one of the 6 ranks
        """
        self.query.raid_rank = RaidRank(raid_rank)
        self.close_modal()

    def dismiss_notification(self) -> None:
        self.notification = None

    # ------------------------------------------------------------------
    # Request
    # ------------------------------------------------------------------

    async def submit(self) -> bool:
        """Send the current form to the advisor.

        Returns:
            True if results are now shown, False otherwise
        """
        if self.phase is ScreenPhase.LOADING:
            logger.warning("Search already in progress, ignoring submit")
            return False

        self.notification = None
        if self.query.missing_fields():
            self.notification = VALIDATION_NOTICE
            return False

        query = self.query.model_copy()
        self.submitted_query = None
        self.recommendations = []
        self.expanded_index = None
        self.phase = ScreenPhase.LOADING
        try:
            recommendations = await self.advisor.fetch_advice(query)
        except ValidationError as e:
            logger.info(f"Incomplete query: {e}")
            self.notification = VALIDATION_NOTICE
            return False
        except Exception as e:
            # Every failure kind collapses into the same user-facing notice
            logger.exception(f"❌ Raid advice request failed: {e}")
            self.notification = FAILURE_NOTICE
            return False
        else:
            self.submitted_query = query
            self.recommendations = recommendations
            self.phase = ScreenPhase.RESULT
            return True
        finally:
            # Also reached on cancellation
            if self.phase is ScreenPhase.LOADING:
                self.phase = ScreenPhase.IDLE

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def toggle_card(self, index: int) -> None:
        """Expand card ``index``, collapsing any other; collapse it if already open.

        Raises:
            RuntimeError: If no results are shown
            IndexError: If there is no card at ``index``
        """
        if self.phase is not ScreenPhase.RESULT:
            raise RuntimeError("No results to expand")
        if not 0 <= index < len(self.recommendations):
            raise IndexError(f"No card at position {index}")
        self.expanded_index = None if self.expanded_index == index else index

    def back(self) -> None:
        """Leave the result view and return to the filled-in form."""
        if self.phase is not ScreenPhase.RESULT:
            return
        self.phase = ScreenPhase.IDLE
        self.recommendations = []
        self.expanded_index = None
        self.submitted_query = None
