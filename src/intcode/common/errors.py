''' Execution errors of the Intcode machine '''


class IntCodeError(Exception):
    pass


class InvalidOpCode(IntCodeError):
    def __init__(self, code: int):
        super().__init__(f'Invalid Op Code found: {code}')
        self.code = code


class InvalidParameterMode(IntCodeError):
    def __init__(self, mode: int):
        super().__init__(f'Invalid Parameter Mode found: {mode}')
        self.mode = mode


class InvalidAddress(IntCodeError):
    def __init__(self, address: int):
        super().__init__(f'Found invalid address: {address}')
        self.address = address


class ImmediateModeOutput(IntCodeError):
    def __init__(self):
        super().__init__('Instruction was set to output in immediate mode')


class UnexpectedEndOfFile(IntCodeError):
    def __init__(self):
        super().__init__('Unexpected end of file')


class MachineFinished(IntCodeError):
    def __init__(self):
        super().__init__('Machine has already finished')


class MachineFailed(IntCodeError):
    def __init__(self):
        super().__init__('Machine has stopped on an earlier error')
