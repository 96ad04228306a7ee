"""
Handlers for the filesystem commands: pwd, ls, cd, cat, open, tree and find.

Each handler resolves its path argument against the session cursor, queries
the file tree port and either returns a CommandResult or raises a
ShellCommandError carrying the exact error line.
"""

from portfolio_shell.entities.Command import CommandResult, EffectKind, EffectRequest
from portfolio_shell.entities.FileNode import LINK, FileNode, glyph_for
from portfolio_shell.entities.OutputLine import OutputLine
from portfolio_shell.exceptions import MissingArgumentError, NotFoundError, WrongTypeError
from portfolio_shell.use_cases.shell.context import ShellContext
from portfolio_shell.utils.paths import ROOT


def _output(*texts: str) -> CommandResult:
    return CommandResult(lines=tuple(OutputLine.output(t) for t in texts))


def _lines(text: str) -> tuple[OutputLine, ...]:
    return tuple(OutputLine.output(t) for t in text.split("\n"))


def _require(args: list[str], message: str) -> str:
    if not args:
        raise MissingArgumentError(message)
    return args[0]


def _lookup(ctx: ShellContext, name: str, token: str) -> tuple[str, FileNode]:
    path = ctx.resolve(token)
    node = ctx.file_tree.lookup(path)
    if node is None:
        raise NotFoundError(f"{name}: {token}: No such file or directory")
    return path, node


def handle_pwd(args: list[str], ctx: ShellContext) -> CommandResult:
    return _output(ctx.cwd)


def handle_ls(args: list[str], ctx: ShellContext) -> CommandResult:
    # Missing and non-folder targets are errors, as for cd.
    if args:
        path, node = _lookup(ctx, "ls", args[0])
        if not node.is_folder:
            raise WrongTypeError(f"ls: {args[0]}: Not a directory")
    else:
        path = ctx.cwd
    children = ctx.file_tree.list_children(path) or ()
    if not children:
        return _output("Directory is empty")
    return CommandResult(
        lines=tuple(
            OutputLine.output(f"{glyph_for(child.type)} {child.name}", child.is_folder)
            for child in children
        )
    )


def handle_cd(args: list[str], ctx: ShellContext) -> CommandResult:
    token = _require(args, "cd: missing path argument")
    path, node = _lookup(ctx, "cd", token)
    if not node.is_folder:
        raise WrongTypeError(f"cd: {token}: Not a directory")
    return CommandResult(cursor=path)


def handle_cat(args: list[str], ctx: ShellContext) -> CommandResult:
    token = _require(args, "cat: missing file argument")
    _, node = _lookup(ctx, "cat", token)
    if node.is_folder:
        raise WrongTypeError(f"cat: {token}: Is a directory")
    body = node.text_payload()
    if body is not None:
        return CommandResult(lines=_lines(body))
    if node.type == LINK and node.url:
        return _output(f"Link: {node.url}", 'Use "open" command to visit')
    raise WrongTypeError(f'cat: Cannot display {node.type} file. Use "open" instead.')


def handle_open(args: list[str], ctx: ShellContext) -> CommandResult:
    token = _require(args, "open: missing file argument")
    path, node = _lookup(ctx, "open", token)
    if node.is_folder:
        return CommandResult(
            lines=(OutputLine.output(f"Opening folder: {node.name or ROOT}"),),
            cursor=path,
            effects=(EffectRequest(EffectKind.OPEN_FILE_MANAGER, path),),
        )
    if node.type == LINK and node.url:
        return CommandResult(
            lines=(OutputLine.output(f"Opening link: {node.url}"),),
            effects=(EffectRequest(EffectKind.OPEN_EXTERNAL_URL, node.url),),
        )
    return CommandResult(
        lines=(OutputLine.output(f"Opening: {node.name}"),),
        effects=(EffectRequest(EffectKind.OPEN_FILE_VIEWER, path),),
    )


def handle_tree(args: list[str], ctx: ShellContext) -> CommandResult:
    token = args[0] if args else ctx.cwd
    lines = ctx.file_tree.build_tree(ctx.resolve(token))
    if lines is None:
        raise NotFoundError(f"tree: {token}: No such file or directory")
    return _output(*lines)


def handle_find(args: list[str], ctx: ShellContext) -> CommandResult:
    term = _require(args, "find: missing search term")
    hits = ctx.file_tree.search(term)
    if not hits:
        return _output(f"No files found matching: {term}")
    return _output(*(hit.path for hit in hits))
