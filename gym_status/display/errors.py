"""Error displays: inline refresh errors and the fatal startup report."""

from rich.text import Text

from ..config import Config


def build_error_line(error: str) -> Text:
    """Build the one-line error shown under the last frame when a refresh fails."""
    return Text(f"Error fetching data: {error}", style="red")


def build_troubleshooting(error: str, config: Config) -> Text:
    """Build the fatal error report with steps the user can try by hand."""
    content = Text()
    content.append(f"\nError: {error}\n", style="bold red")
    content.append("\nTroubleshooting:\n", style="dim")
    content.append("  1. Check your internet connection\n", style="dim")
    content.append('  2. Verify httpx is installed: python -c "import httpx"\n', style="dim")
    content.append("  3. Test the API manually:\n", style="dim")
    content.append(f'     curl "{config.locations_url}"\n', style="dim")
    return content
