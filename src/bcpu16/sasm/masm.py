from pathlib import Path
import logging as lg
from typing import Tuple

import click

from bcpu16.common.hwconf import PROGRAM_START
from bcpu16.common.rom import pack_rom
from bcpu16.sasm.asm import CompilationItem, compile_items


def collect_file(filepath: str | Path) -> CompilationItem:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')
    item = CompilationItem()
    item.contents = filepath.read_text()
    item.modulename = filepath.stem
    return item


def collect_files(filepaths: list[Path]) -> list[CompilationItem]:
    return [collect_file(path) for path in filepaths]


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--base', type=int, default=PROGRAM_START, help='Load address of the image')
@click.argument('sources', nargs=-1, type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, base: int, sources: Tuple[Path], binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("BCPU16 ASM")

    items = collect_files(list(sources))
    words = compile_items(items, base)
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(pack_rom(words))
    lg.info(f'{len(words)} words written to {binary}')


if __name__ == "__main__":
    compile()
