from ._comparable import Comparable
from ._exceptions import EntryDoesNotExistError, EntryExistsAlreadyError
from ._hash_set import HashSet
from ._read_write_lock import ReadWriteLock
