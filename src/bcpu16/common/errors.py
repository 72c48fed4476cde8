''' Machine error taxonomy '''


class MachineError(Exception):
    pass


class InvalidMemoryLocation(MachineError):
    def __init__(self, address: int):
        super().__init__(f'Invalid memory location: {address}')
        self.address = address


class InvalidRegister(MachineError):
    def __init__(self, index: int):
        super().__init__(f'Bad register designation: {index}')
        self.index = index


class InvalidOpcode(MachineError):
    def __init__(self, opcode: int, word: int):
        super().__init__(f'Invalid opcode: {opcode} ({word:016b})')
        self.opcode = opcode
        self.word = word


class DivisionByZero(MachineError):
    def __init__(self, regsrc: int, regtgt: int):
        super().__init__(f'Division by zero: r{regsrc} / r{regtgt}')
        self.regsrc = regsrc
        self.regtgt = regtgt


class StepLimitExceeded(MachineError):
    def __init__(self, steps: int):
        super().__init__(f'No halt after {steps} steps')
        self.steps = steps


class AssemblerError(Exception):
    pass
