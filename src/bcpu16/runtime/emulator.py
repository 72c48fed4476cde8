import sys
from pathlib import Path
import logging as lg
import traceback

import click

from bcpu16.common.hwconf import PROGRAM_START
from bcpu16.common.rom import unpack_rom
from bcpu16.common.errors import MachineError
import bcpu16.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_EXEC_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_GENERAL_ERROR = 100


def execute(rom: bytes, max_steps: int | None = None) -> cpu.CPU:
    proc = cpu.CPU()
    proc.load(PROGRAM_START, unpack_rom(rom))

    try:
        proc.run(max_steps=max_steps)
    finally:
        proc.debug_dump()

    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--max-steps', type=int, default=None, help='Abort after this many instructions')
@click.argument('rom_filename', type=Path)
def run(verbose: bool, max_steps: int | None, rom_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("BCPU16")

    try:
        rom = rom_filename.read_bytes()
        execute(rom, max_steps)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except MachineError as e:
        lg.error(f'Execution halted on machine error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_GENERAL_ERROR)


if __name__ == '__main__':
    run()
