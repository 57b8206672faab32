"""scalarconf: flat scalar configuration stored as JSON or YAML.

A :class:`ScalarStore` maps string keys to str, int, or bool values and can be
read and written through attributes as well as through index access:

```python
from scalarconf import ScalarStore

config = ScalarStore.load("config.txt")   # JSON first, YAML on fallback
if getattr(config, "quiet?"):
    ...
config.retries = 3
config.save("config.txt")                 # same format it was read in
```
"""

from scalarconf.coercion import ScalarValue, coerce_key, coerce_value
from scalarconf.exceptions import (
    InvalidFormatError,
    InvalidKeyError,
    InvalidValueError,
    KeyNotFoundError,
    ScalarConfError,
    UnknownFormatError,
    UnreadableConfigSourceError,
    UnseekableSourceError,
)
from scalarconf.formats import Format, FormatResolver
from scalarconf.store import ScalarStore

__version__ = "0.1.0"

__all__ = [
    "ScalarStore",
    "ScalarValue",
    "Format",
    "FormatResolver",
    "coerce_key",
    "coerce_value",
    "ScalarConfError",
    "UnreadableConfigSourceError",
    "UnseekableSourceError",
    "KeyNotFoundError",
    "InvalidFormatError",
    "UnknownFormatError",
    "InvalidValueError",
    "InvalidKeyError",
    "__version__",
]
