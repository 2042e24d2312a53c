from __future__ import annotations

import os

import gradio as gr

from controllers.data_paths import DataPaths
from views.tabs import solve


def main() -> None:
    paths = DataPaths.from_data_dir()

    with gr.Blocks(title="Maze Solver") as demo:
        with gr.Tabs():
            with gr.Tab("Solve Maze"):
                solve.render(data_paths=paths)

    demo.launch(
        server_name=os.getenv("GRADIO_SERVER_NAME", "0.0.0.0"),
        server_port=int(os.getenv("GRADIO_SERVER_PORT", "7860")),
    )


if __name__ == "__main__":
    main()
