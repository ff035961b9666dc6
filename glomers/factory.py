
from __future__ import annotations
from typing import Any, Optional, Union
import logging
import sys

from .builder import RuntimeBuilder
from .errors import NodeError
from .handler import Handler
from .log import configure_logging
from .transport import Transport

logger = logging.getLogger(__name__)

def run_node(handler: Handler,
             *,
             transport: Optional[Transport] = None,
             codec: Union[str, Any] = "json",
             log_level: Optional[Union[str, int]] = None) -> int:
    """
    One-liner entry point:
      sys.exit(run_node(EchoHandler()))

    - handler: node logic (see glomers.handler.Handler)
    - transport: Transport instance; stdin/stdout when omitted
    - codec: "json" | Codec instance
    - log_level: overrides $GLOMERS_LOG_LEVEL

    Returns the process exit status: 0 once input closes cleanly,
    1 on a fatal transport or decode failure.
    """
    configure_logging(log_level)
    runtime = (RuntimeBuilder(transport=transport, codec=codec)
               .with_handler(handler)
               .build())
    try:
        runtime.run()
    except NodeError as ex:
        cause = ex.__cause__
        logger.error("Node %s failed while %s: %s%s", runtime.node_id or "?", runtime.state.value,
                     ex, f" (caused by {cause!r})" if cause else "")
        return 1
    return 0

def main(handler: Handler) -> None:
    sys.exit(run_node(handler))
