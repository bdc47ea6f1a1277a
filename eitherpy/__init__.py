from .either import Either, Left, Right, left, right
from .option import Option, Some, NONE, from_nullable
from .result import Result, Ok, Err, from_either as result_from_either, to_either as result_to_either
from .collection import partition_map, partitioned, lefts, rights, partition, sequence, traverse
from .errors import Failure
from .logger import ConsoleLogger, get_logger, set_logger, configure
