"""
Walk through the path-utils helpers against an ``output/`` folder.

Run from the repository root:
    python examples/usage.py
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path

from path_utils import (
    CreatePath,
    JsonFile,
    JsonFileOptions,
    TextFile,
    TextFileOptions,
    read_directory,
)
from path_utils.config import Config, apply_config, load_config

logger = logging.getLogger("path_utils.examples")

JSON_FILE_PATH = "output/data.json"
TEXT_FILE_PATH = "output/data.txt"


def create_path_example(config: Config) -> None:
    logger.info("--- CreatePath Example ---")
    options = config.options()
    creator = CreatePath(display=options.display, sink=options.sink)

    creator.make_dir("output/nested/folders")
    creator.make_file("output/hello.txt", "Hello, World!")
    creator.make_file("output/config.json", {
        "name": "path-utils",
        "version": "1.1.0",
        "features": ["CreatePath", "JsonFile", "TextFile", "read_directory"],
    })


async def json_file_example(config: Config) -> None:
    logger.info("--- JsonFile Example ---")
    data_file = JsonFile(JSON_FILE_PATH, config.options(
        JsonFileOptions,
        initial_value={"created": datetime.now().isoformat(), "items": []},
    ))

    data = await data_file.read()
    logger.info(f"Initial data: {data}")

    data["items"].append({"id": 1, "name": "Item 1"})
    data["items"].append({"id": 2, "name": "Item 2"})
    data["lastUpdated"] = datetime.now().isoformat()
    data_file.write(data)

    logger.info(f"Updated data: {await data_file.read()}")


async def text_file_example(config: Config) -> None:
    logger.info("--- TextFile Example ---")
    text_file = TextFile(TEXT_FILE_PATH, config.options(TextFileOptions))

    text_file.write("1. First Line")
    await text_file.push("2. Appended without new line")
    await text_file.push("3. Appended with new line", True)
    await text_file.unshift("0. Prepended without new line")
    await text_file.unshift("-1. Prepended with new line", True)

    logger.info(f"Final content:\n{await text_file.read()}")


async def read_directory_example() -> None:
    logger.info("--- read_directory Example ---")
    listing = await read_directory("output", ["nested"])
    logger.info(f"Entries in output: {listing.to_dict()}")


async def main(config: Config) -> None:
    create_path_example(config)
    await json_file_example(config)
    await text_file_example(config)
    await read_directory_example()
    logger.info("All examples completed successfully!")


if __name__ == "__main__":
    config = load_config(Path(__file__).with_name("path_utils.toml"))
    apply_config(config)
    asyncio.run(main(config))
