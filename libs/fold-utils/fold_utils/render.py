import logging
from collections.abc import Iterable, Sequence
from functools import partial
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from fold_core.fold import MISSING, Combiner, fold_steps
from fold_utils.common import to_clean_table_cell
from fold_utils.settings import LOGGER_NAME, MAX_CELL_LEN, TRACE_TEMPLATE

logger = logging.getLogger(LOGGER_NAME)

# ---------------------------------------------------------------------------- #
#                                Trace renderer                                #
# ---------------------------------------------------------------------------- #


class TraceRenderer:
    """Renders the step-by-step trace of a fold as a Markdown document."""

    max_cell_len: int | None

    def __init__(self, *, max_cell_len: int | None = MAX_CELL_LEN):
        self.max_cell_len = max_cell_len
        self.template_env = Environment(
            loader=FileSystemLoader(Path(__file__).parent / "templates"),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template_env.filters["cell"] = partial(to_clean_table_cell, max_len=max_cell_len)

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.template_env.get_template(template_name)
        return template.render(**kwargs)

    def render(
        self,
        sequence: Iterable[Any],
        combine: Combiner,
        seed: Any = MISSING,
        *,
        title: str = "fold",
    ) -> str:
        items = sequence if isinstance(sequence, Sequence) else tuple(sequence)
        steps = list(fold_steps(items, combine, seed))

        has_seed = seed is not MISSING
        if steps:
            result = steps[-1].accumulator
        elif has_seed:
            result = seed
        else:
            result = items[0]  # single element, nothing to combine

        return self.render_template(
            TRACE_TEMPLATE,
            title=title,
            has_seed=has_seed,
            seed=seed if has_seed else None,
            first=items[0] if len(items) > 0 else None,
            element_count=len(items),
            steps=steps,
            result=result,
        )


def render_trace(
    sequence: Iterable[Any], combine: Combiner, seed: Any = MISSING, *, title: str = "fold"
) -> str:
    return TraceRenderer().render(sequence, combine, seed, title=title)


def write_trace(path: Path, content: str) -> Path:
    """Writes a rendered trace to `path`, creating missing parent directories."""

    path = path.absolute()
    if path.is_dir():
        raise IsADirectoryError(f"trace output requires a file path, found a directory: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    logger.info(f"trace written to {path}")
    return path
