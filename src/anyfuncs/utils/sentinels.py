from typing import Any, cast

# Sentinel value for arguments the caller did not supply
UNSET = cast(Any, object())
