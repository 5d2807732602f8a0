"""Entry point: analyze every export in INPUT_DIR and write results.json"""
import asyncio
import json
import logging
import os
import sys
import traceback
from pathlib import Path
from typing import List

from unwrapped_stats.config import settings
from unwrapped_stats.pipeline import FileSource, HistoryAnalyzer
from unwrapped_stats.utils.json_encoder import DateTimeEncoder

logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')
logger = logging.getLogger(__name__)

def _file_sources(input_dir: Path) -> List[FileSource]:
    """One async reader per matching file, in sorted path order"""
    paths = sorted(input_dir.glob(settings.INPUT_GLOB))
    logger.info(f"Found {len(paths)} file(s) in {input_dir}")

    def reader(path: Path) -> FileSource:
        async def read() -> bytes:
            return await asyncio.to_thread(path.read_bytes)
        return read

    return [reader(path) for path in paths]

def run() -> None:
    """Analyze all input files."""
    try:
        input_dir = Path(settings.INPUT_DIR)
        if not input_dir.is_dir():
            raise FileNotFoundError(f"Input directory not found: {input_dir}")

        logger.info("Using configuration:")
        logger.info(json.dumps(settings.model_dump(), indent=2))

        analyzer = HistoryAnalyzer(settings)
        response = asyncio.run(analyzer.analyze_async(_file_sources(input_dir)))

        os.makedirs(settings.OUTPUT_DIR, exist_ok=True)
        output_path = os.path.join(settings.OUTPUT_DIR, "results.json")
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(response.model_dump(), f, indent=2, ensure_ascii=False, cls=DateTimeEncoder)

        if response.ok:
            logger.info(f"Analysis complete: {response.summary.as_display()}")
        else:
            logger.warning(f"Analysis finished with {response.outcome.value}: {response.message}")

    except Exception as e:
        logger.error(f"Error during analysis: {e}")
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()
