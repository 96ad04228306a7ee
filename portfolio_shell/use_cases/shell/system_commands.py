"""
Handlers for the commands outside the filesystem core: static text, the
matrix hand-off, collected emails and the portfolio folder shortcuts.
"""

from portfolio_shell.entities.Command import CommandName, CommandResult, EffectKind, EffectRequest
from portfolio_shell.entities.OutputLine import OutputLine
from portfolio_shell.exceptions import NotFoundError
from portfolio_shell.use_cases.shell.context import ShellContext
from portfolio_shell.use_cases.shell.static_text import HELP_MESSAGE, NEOFETCH_OUTPUT

DATE_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z (%Z)"

# command -> (folder path, label used in the confirmation line)
SHORTCUTS = {
    CommandName.PROJECTS: ("/projects", "Projects"),
    CommandName.ABOUT: ("/about", "About"),
    CommandName.CONTACT: ("/contact", "Contact"),
}


def _text_block(text: str) -> CommandResult:
    return CommandResult(lines=tuple(OutputLine.output(t) for t in text.split("\n")))


def handle_help(args: list[str], ctx: ShellContext) -> CommandResult:
    return _text_block(HELP_MESSAGE)


def handle_neofetch(args: list[str], ctx: ShellContext) -> CommandResult:
    return _text_block(NEOFETCH_OUTPUT)


def handle_clear(args: list[str], ctx: ShellContext) -> CommandResult:
    return CommandResult(bypass_log=True, clear_log=True)


def handle_date(args: list[str], ctx: ShellContext) -> CommandResult:
    now = ctx.now()
    if now.tzinfo is None:
        now = now.astimezone()
    return CommandResult(lines=(OutputLine.output(now.strftime(DATE_FORMAT)),))


def handle_matrix(args: list[str], ctx: ShellContext) -> CommandResult:
    # The terminal window closes, so nothing is echoed.
    return CommandResult(
        effects=(
            EffectRequest(EffectKind.START_MATRIX_EFFECT),
            EffectRequest(EffectKind.CLOSE_TERMINAL),
        ),
        bypass_log=True,
    )


def handle_emails(args: list[str], ctx: ShellContext) -> CommandResult:
    emails = ctx.emails.collected()
    if not emails:
        return CommandResult(lines=(OutputLine.output("No emails collected yet."),))
    return CommandResult(
        lines=(
            OutputLine.output("Collected Emails:"),
            *(OutputLine.output(f"- {email}") for email in emails),
        )
    )


def _shortcut(name: CommandName, ctx: ShellContext) -> CommandResult:
    path, label = SHORTCUTS[name]
    node = ctx.file_tree.lookup(path)
    if node is None or not node.is_folder:
        raise NotFoundError(f"{name.value}: {path}: No such file or directory")
    return CommandResult(
        lines=(OutputLine.output(f"Opening {label} folder..."),),
        cursor=path,
        effects=(EffectRequest(EffectKind.OPEN_FILE_MANAGER, path),),
    )


def handle_projects(args: list[str], ctx: ShellContext) -> CommandResult:
    return _shortcut(CommandName.PROJECTS, ctx)


def handle_about(args: list[str], ctx: ShellContext) -> CommandResult:
    return _shortcut(CommandName.ABOUT, ctx)


def handle_contact(args: list[str], ctx: ShellContext) -> CommandResult:
    return _shortcut(CommandName.CONTACT, ctx)
