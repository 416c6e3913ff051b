from .const     import TableConfig, CHAINING, LINEAR_PROBING, DOUBLE_HASHING, STRATEGIES
from .results   import ErrorKind, Failure, Ok
from .service   import HashingService
from .placement import Placement
from .table     import BucketTable, NodeDetail, NodeSummary, StorageItem, StorageNode
__all__ = ["HashingService", "BucketTable", "TableConfig", "Placement",
           "StorageNode", "StorageItem", "NodeSummary", "NodeDetail",
           "ErrorKind", "Failure", "Ok",
           "CHAINING", "LINEAR_PROBING", "DOUBLE_HASHING", "STRATEGIES"]
