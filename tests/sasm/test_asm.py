import pytest

import bcpu16.common.ops as ops
import bcpu16.sasm.asm as asm
from bcpu16.common.codec import encode
from bcpu16.common.hwconf import PROGRAM_START
from bcpu16.common.errors import AssemblerError

from unit_utils import run_sasm


def test_instructions():
    words = asm.assemble('\n'.join([
        'HLT',
        'NOP',
        'JMP 2048',
        'SET r0, 16',
        'LDR r1, 4095',
        'STR r2, 0x100',
        'ADD r3, r4',
        'CMP r15 r0',
        'SHL 3, r7',
        'NOT r9',
        'DW 0b101',
    ]))

    assert words == [
        encode(ops.HLT),
        encode(ops.NOP),
        encode(ops.JMP, memloc=2048),
        encode(ops.SET, 0, 0), 16,
        encode(ops.LDR, 0, 1), 4095,
        encode(ops.STR, 2, 0), 0x100,
        encode(ops.ADD, 3, 4),
        encode(ops.CMP, 15, 0),
        encode(ops.SHL, 3, 7),
        encode(ops.NOT, 0, 9),
        5,
    ]


def test_case_and_comments():
    source = '''
        // leading comment
        hlt            // trailing
        Nop ; other style

    '''
    assert asm.assemble(source) == [encode(ops.HLT), encode(ops.NOP)]


def test_labels():
    source = '''
        JMP end
        SET r0, data
    data: DW 7
    end:  HLT
    '''
    words = asm.assemble(source)
    assert words == [
        encode(ops.JMP, memloc=PROGRAM_START + 4),
        encode(ops.SET, 0, 0), PROGRAM_START + 3,
        7,
        encode(ops.HLT),
    ]


def test_base():
    words = asm.assemble('start: JMP start', base=1000)
    assert words == [encode(ops.JMP, memloc=1000)]


def test_sum():
    proc, words = run_sasm('testdata/sum.sasm')
    assert proc.get_memory(PROGRAM_START + len(words) - 1) == 55
    assert proc.get_register(0) == 0
    assert proc.get_equal()


def test_bits():
    proc, words = run_sasm('testdata/bits.sasm')
    assert proc.get_memory(PROGRAM_START + len(words) - 1) == 0xFF50
    assert proc.get_register(5) == 0xFF
    assert not proc.get_overflow()


@pytest.mark.parametrize('source, message', [
    ('FOO r1', 'Unknown command'),
    ('ADD r1, r16', 'Unknown command'),
    ('HLT NOP', 'Unknown command'),
    ('JMP nowhere', 'Unknown label'),
    ('a: NOP\na: HLT', 'Duplicate label'),
    ('JMP 4096', '12 bits'),
    ('SHL 16, r0', '4 bits'),
    ('SET r0, 65536', 'does not fit'),
])
def test_errors(source, message):
    with pytest.raises(AssemblerError) as e:
        asm.assemble(source)

    assert message in str(e.value)


def test_error_location():
    item = asm.CompilationItem()
    item.modulename = 'prog'
    item.contents = 'NOP\nNOP\nBAD'

    with pytest.raises(AssemblerError) as e:
        asm.compile_items([item])

    assert str(e.value).startswith('prog:3:')


def test_label_out_of_jump_range():
    source = 'JMP far\nfar: HLT'

    with pytest.raises(AssemblerError):
        asm.assemble(source, base=4095)


def test_items_share_labels():
    first = asm.CompilationItem()
    first.contents = 'JMP done'
    second = asm.CompilationItem()
    second.contents = 'done: HLT'

    assert asm.compile_items([first, second]) == [
        encode(ops.JMP, memloc=PROGRAM_START + 1),
        encode(ops.HLT),
    ]
