from .client import Client
from .config import ClientConfig
from .errors import ClientError, InvalidConfig, MalformedQuery, InvalidAddress, ExecutorError, ExportError
from .query import Query, ReceiptSelection, InputSelection, OutputSelection, FieldSelection
from .types import Block, Transaction, Receipt, Input, Output, LogContext, \
    QueryResponseTyped, QueryResponseData, LogResponse, TxType, TxStatus, ReceiptType, InputType, OutputType
from .util.log import init_logging
