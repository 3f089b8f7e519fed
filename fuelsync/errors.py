from typing import Optional


class ClientError(Exception):
    def __init__(self, context: str, cause: Optional[BaseException] = None):
        self.context = context
        self.cause = cause
        if cause is None:
            self.message = context
        else:
            self.message = f'{context}: {cause}'
        super().__init__(self.message)


class InvalidConfig(ClientError):
    pass


class MalformedQuery(ClientError):
    pass


class InvalidAddress(ClientError):
    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f'convert address {address}', ValueError(reason))


class ExecutorError(ClientError):
    pass


class ExportError(ClientError):
    pass
