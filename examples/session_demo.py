"""Drive a session without a window: a few clicks, then a PNG export.

Run directly with:
    python examples/session_demo.py [config.yaml]
"""
import logging
import sys

import numpy as np

from huecanvas import FileSink, PointerEvent, Session, fit_transform, load_config


def main(config_path=None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    params = load_config(config_path)
    session = Session(params, rng=np.random.default_rng(7))
    print("Scheme of the day:", session.scheme.name)

    width, height = session.size
    for x, y in [(width * 0.25, height * 0.3), (width * 0.5, height * 0.5), (width * 0.8, height * 0.7)]:
        result = session.click(PointerEvent(x, y))
        print(f"click ({x:.0f}, {y:.0f}): rotation {result.rotation:.2f} deg -> {result.color.hex}")

    print("Background filter:", session.preview_filter())

    # A 1280x720 window over the square canvas
    transform = fit_transform(1280, 720, width, height)
    bounds = transform.visible_region(1280, 720)
    controller = session.copy_controller(downloads=FileSink("."))
    if controller.download(bounds, session.rotation.current(), output_size=(1280, 720)):
        print("Saved", controller.downloads.last_path)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
