import logging as lg

import pyparsing as pp

from bcpu16.common.codec import encode
from bcpu16.common.hwconf import PROGRAM_START, ADDRESS_MASK, MEMORY_SIZE
from bcpu16.common.errors import AssemblerError
from bcpu16.sasm.fpp import FPP
import bcpu16.sasm.grammar as grammar


class CompilationItem:
    modulename: str = '<source>'
    contents: str


def first_pass(fpp: FPP, item: CompilationItem):
    for lineno, line in enumerate(item.contents.splitlines(), start=1):
        try:
            actions = grammar.statement.parse_string(line, parse_all=True)

            for (func, arg) in actions:  # type: ignore
                func(fpp, arg)

        except pp.ParseException:
            raise AssemblerError(f'{item.modulename}:{lineno}: Unknown command {line.strip()}')

        except AssemblerError as e:
            raise AssemblerError(f'{item.modulename}:{lineno}: {e}') from e


def resolve(fpp: FPP, labelname: str, op: int | None) -> int:
    if labelname not in fpp.label_dict:
        raise AssemblerError(f'Unknown label {labelname}')

    address = fpp.label_dict[labelname]

    if op is None:
        return address

    if address > ADDRESS_MASK:
        raise AssemblerError(f'Label {labelname} @ 0x{address:X} does not fit in 12 bits')

    return encode(op, memloc=address)


def compile_items(compile_items: list[CompilationItem], base: int = PROGRAM_START) -> list[int]:
    # First pass
    fpp = FPP(base)

    for compile_item in compile_items:
        lg.info("Processing {0}".format(compile_item.modulename))
        first_pass(fpp, compile_item)

    if fpp.address() > MEMORY_SIZE:
        raise AssemblerError(f'Program of {fpp.offset} words does not fit @ 0x{base:X}')

    # Second pass
    words = []

    for (t, d) in fpp.cmd_list:
        if t == 'word':
            words.append(d)

        if t == 'ref':
            (labelname, op) = d
            words.append(resolve(fpp, labelname, op))

    return words


def assemble(source: str, base: int = PROGRAM_START) -> list[int]:
    item = CompilationItem()
    item.contents = source
    return compile_items([item], base)
