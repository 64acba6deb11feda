"""
Interactive CLI adapter for Recipe Chef.

Architectural role:
- Provides a terminal-only interface over the orchestration controller.
- Renders the recipe card and toast notifications as plain text.
- Delegates the generation flow to `OrchestrationController.submit`.

Request lifecycle (per user turn, CLI):
1. Read one line of ingredients from stdin.
2. Handle local control commands (`exit`/`quit`, `clear`).
3. Forward everything else, including empty lines, to the controller.
4. Print whatever the state listener rendered.

Input validation behavior:
- Empty input is forwarded so the controller can emit its warning toast.

Error handling strategy:
- EOF and keyboard interrupts terminate the loop without traceback output.
- Generation failures arrive as notifications, never as exceptions.
"""

from dotenv import load_dotenv

load_dotenv()

import sys
import asyncio
import logging

from recipe_chef.core.engine import OrchestrationController
from recipe_chef.core.state import ImageStatus, Phase, SessionState
from recipe_chef.llm.provider_config import LOG_LEVEL


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (AttributeError, ValueError):
        pass


# =========================================================
# RENDERING
# =========================================================

RULE = "-" * 60


def render_notification(state: SessionState) -> str:
    notification = state.notification
    if notification is None:
        return ""
    marker = "!" if notification.level == "warning" else "x"
    lines = [f"[{marker}] {notification.title}"]
    if notification.description:
        lines.append(f"    {notification.description}")
    return "\n".join(lines)


def render_image(state: SessionState) -> str:
    if state.image_status is ImageStatus.LOADING:
        return "[image] generating..."
    if state.image_status is ImageStatus.LOADED and state.image_url:
        return f"[image] {state.image_url}"
    if state.image_status is ImageStatus.UNAVAILABLE:
        return "[image] Image Unavailable"
    return ""


def render_recipe(state: SessionState) -> str:
    """Render the recipe card: title, description, ingredients, numbered steps."""
    recipe = state.recipe
    if recipe is None:
        return ""

    lines = [recipe.title, "=" * len(recipe.title)]
    if recipe.description:
        lines.extend(["", recipe.description])

    lines.extend(["", "Ingredients"])
    lines.extend(f"  • {item}" for item in recipe.ingredients)

    lines.extend(["", "How to make it"])
    lines.extend(f"  {index}. {step}" for index, step in enumerate(recipe.instructions, start=1))

    return "\n".join(lines)


def render(state: SessionState) -> str:
    """Render the whole screen for the current state."""
    if state.phase is Phase.GENERATING:
        return "Cooking up ideas..."

    parts = [render_notification(state)]

    if state.phase is Phase.DISPLAYING:
        parts.append(render_image(state))
        parts.append(render_recipe(state))
    elif state.phase is Phase.EMPTY and state.notification is None:
        parts.append("Ready to Cook? List the ingredients you have, and let's create something tasty!")

    return "\n\n".join(part for part in parts if part)


class TerminalView:
    """State listener printing only the regions that changed."""

    def __init__(self, out=None):
        self.out = out or sys.stdout
        self._last = None

    def __call__(self, state: SessionState) -> None:
        last = self._last
        self._last = state

        if state.phase is Phase.GENERATING:
            if last is None or last.phase is not Phase.GENERATING:
                print("Cooking up ideas...", file=self.out, flush=True)
            return

        if (
            last is not None
            and last.phase is Phase.DISPLAYING
            and state.phase is Phase.DISPLAYING
            and last.recipe == state.recipe
        ):
            if last.image_status is state.image_status and last.image_url == state.image_url:
                # Same recipe and image: a rejected submission added a toast.
                print(render_notification(state), file=self.out, flush=True)
                return
            text = render_image(state)
            if text and state.image_status is not ImageStatus.LOADING:
                print(text, file=self.out, flush=True)
            return

        text = render(state)
        if text:
            print(text, file=self.out, flush=True)


# =========================================================
# MAIN
# =========================================================

def main():
    """
    Run the interactive terminal session.

    Local commands:
    - `exit` / `quit`: leave the session.
    - `clear`: reset the screen to its empty state.
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = OrchestrationController()
    controller.subscribe(TerminalView())

    print("AI Recipe Chef started. (Type 'exit' to quit)")
    print("Turn your pantry finds into culinary delights!\n")
    print(RULE)

    while True:

        try:
            ingredients = input("Ingredients: ")

        except EOFError:
            print("\nSession closed.")
            break

        except KeyboardInterrupt:
            print("\nOperation cancelled by user.")
            break

        command = ingredients.strip().lower()

        if command in ("exit", "quit"):
            print("Shutting down.")
            break

        if command == "clear":
            controller.reset()
            continue

        print()
        asyncio.run(controller.submit(ingredients))
        print("\n" + RULE + "\n")


if __name__ == "__main__":
    main()
