"""
Tera Raid Advisor MCP Server
Solo Tera Raid counter suggestions, driven as a single search screen.
"""

import logging
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .advisor import RaidAdvisor
from .config import AdvisorConfig
from .matcher import load_reference_table
from .models import RaidRank, TeraType
from .render import render_screen
from .screen import Modal, RaidScreen

logger = logging.getLogger("tera-raid-advisor")

logging.basicConfig(
    level=logging.DEBUG,
    )

if not load_dotenv():
    logger.warning("❌ .env file invalid or not found! Reading the API key from the environment only.")

config = AdvisorConfig()
reference_table = load_reference_table(config.dataset_path)
logger.debug(f"📚 Reference table ready ({len(reference_table)} entries)")

advisor = RaidAdvisor(config=config)
screen = RaidScreen(advisor, reference_table=reference_table, suggestion_limit=config.suggestion_limit)

mcp = FastMCP(
    name="tera-raid-advisor"
)

logger.debug("✅ Server initialized, registering tools")


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def suggest_pokemon(
    partial_name: Annotated[str, Field(description="Name typed so far, in hiragana or katakana")],
) -> str:
    """Autocomplete an opponent name from the bundled Pokémon list."""
    suggestions = reference_table.suggest(partial_name, limit=config.suggestion_limit)
    if not suggestions:
        return "No matching Pokémon."
    return "\n".join(s.name for s in suggestions)


@mcp.tool
def list_tera_types() -> str:
    """List the 18 Tera types that can be selected."""
    return "\n".join(t.value for t in TeraType)


@mcp.tool
def list_raid_ranks() -> str:
    """List the raid difficulty ranks that can be selected."""
    return "\n".join(
        f"{r.value} (default)" if r is RaidRank.default() else r.value
        for r in RaidRank
    )


@mcp.tool
def show_screen() -> str:
    """Show the search screen in its current state."""
    return render_screen(screen)


@mcp.tool
def set_target(
    name: Annotated[str, Field(description="Opponent Pokémon name (partial input shows suggestions)")],
) -> str:
    """Type into the opponent name field."""
    screen.set_target_name(name)
    return render_screen(screen)


@mcp.tool
def choose_suggestion(
    index: Annotated[int, Field(description="Position of the suggestion in the list, starting at 0")],
) -> str:
    """Fill the opponent name from one of the shown suggestions."""
    try:
        screen.choose_suggestion(index)
    except IndexError as e:
        return f"Error: {e}"
    return render_screen(screen)


@mcp.tool
def choose_tera_type(
    tera_type: Annotated[str | None, Field(description="One of the 18 Tera types; omit to open the picker")] = None,
) -> str:
    """Open the Tera type picker, or select a Tera type directly."""
    if tera_type is None:
        screen.open_modal(Modal.TERA_TYPE)
        return render_screen(screen)
    try:
        screen.select_tera_type(tera_type)
    except ValueError:
        return f"Error: '{tera_type}' is not a Tera type. Use list_tera_types to see valid values."
    return render_screen(screen)


@mcp.tool
def choose_raid_rank(
    raid_rank: Annotated[str | None, Field(description="One of the raid ranks; omit to open the picker")] = None,
) -> str:
    """Open the difficulty picker, or select a raid rank directly."""
    if raid_rank is None:
        screen.open_modal(Modal.RAID_RANK)
        return render_screen(screen)
    try:
        screen.select_raid_rank(raid_rank)
    except ValueError:
        return f"Error: '{raid_rank}' is not a raid rank. Use list_raid_ranks to see valid values."
    return render_screen(screen)


@mcp.tool
def cancel_picker() -> str:
    """Close the open picker without changing the selection."""
    screen.close_modal()
    return render_screen(screen)


@mcp.tool
async def search_raid_advice() -> str:
    """Ask the AI for three solo counters to the raid described in the form."""
    await screen.submit()
    return render_screen(screen)


@mcp.tool
def toggle_card(
    index: Annotated[int, Field(description="Position of the result card, starting at 0")],
) -> str:
    """Expand a result card to show its rationale, moves and turn chart, or collapse it."""
    try:
        screen.toggle_card(index)
    except (IndexError, RuntimeError) as e:
        return f"Error: {e}"
    return render_screen(screen)


@mcp.tool
def back_to_search() -> str:
    """Leave the results and return to the search form."""
    screen.back()
    screen.dismiss_notification()
    return render_screen(screen)


logger.debug("✅ All tools successfully registered. Tera Raid Advisor running! ⚔️")

def main() -> None:
    """Main entry point for the Tera Raid Advisor MCP Server."""
    mcp.run()

if __name__ == "__main__":
    main()
