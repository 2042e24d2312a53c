from __future__ import annotations

from pathlib import Path

import gradio as gr
from PIL import Image

from controllers.data_paths import DataPaths
from controllers.settings import load_settings
from controllers.solve import describe_failure, solve_maze_image
from models.errors import MazeError
from models.grid import MazeGrid
from models.utils.image_io import load_image, save_png
from models.utils.naming import canonical_maze_name, prefixed_name
from views.components import file_selector


def render(*, data_paths: DataPaths) -> None:
    """Upload or reuse a maze PNG and show its breadth-first solution."""

    gr.Markdown(
        "Upload a **black-and-white maze** (1px white corridors, black walls, "
        "one entrance and one exit on the border) or pick one from "
        "`data/mazes`. The solution is saved as `solution_<name>.png`."
    )

    upload_input = gr.File(
        label="Upload maze",
        file_types=["image"],
        file_count="single",
    )
    with gr.Row():
        existing_selector, _ = file_selector(
            label="Or pick an existing maze",
            choices_provider=data_paths.list_mazes,
            refresh_label="Refresh maze list",
        )

    run_button = gr.Button("Solve maze", variant="primary")

    with gr.Row():
        maze_preview = gr.Image(label="Maze", type="pil")
        solution_preview = gr.Image(label="Solution", type="pil")

    status_output = gr.Markdown("")

    def _handle(selected_filename: str | None, uploaded_file: str | None):
        image, source_name = _resolve_maze_source(data_paths, uploaded_file, selected_filename)
        name = canonical_maze_name(source_name)
        try:
            result = solve_maze_image(image, name=name, color=load_settings().solution_color)
        except MazeError as exc:
            raise gr.Error(describe_failure(exc, MazeGrid.from_image(image))) from exc

        data_paths.ensure_directories()
        saved = save_png(result.solution_image, data_paths.solutions_dir / prefixed_name("solution", name))
        status = f"Saved `{saved.name}` ({result.summary()})."
        return image, result.solution_image, status

    run_button.click(
        fn=_handle,
        inputs=[existing_selector, upload_input],
        outputs=[maze_preview, solution_preview, status_output],
        show_progress=True,
    )


def _resolve_maze_source(
    data_paths: DataPaths,
    uploaded_file: str | None,
    selected_filename: str | None,
) -> tuple[Image.Image, str]:
    if uploaded_file:
        upload_path = Path(uploaded_file)
        return _load_rgb_image(upload_path), upload_path.name

    if selected_filename:
        candidate = Path(selected_filename)
        if not candidate.is_absolute():
            candidate = data_paths.mazes_dir / candidate.name
        if not candidate.exists():
            raise gr.Error(f"{candidate} does not exist. Refresh the list and try again.")
        return _load_rgb_image(candidate), candidate.name

    raise gr.Error("Upload a maze or choose an existing filename first.")


def _load_rgb_image(path: Path) -> Image.Image:
    try:
        return load_image(path, mode="RGB")
    except ValueError as exc:
        raise gr.Error(str(exc)) from exc


__all__ = ["render"]
