"""Web endpoint watchers: one HTTP check in, one validated result out."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    ArgumentNullError,
    ConfigurationError,
    InvalidArgumentError,
    UriFormatError,
    WatcherExecutionError,
    WebWatcherError,
)
from .web import (  # noqa: E402
    HttpMethod,
    HttpRequest,
    HttpResponse,
    HttpService,
    HttpxService,
    WebWatcher,
    WebWatcherCheckResult,
    WebWatcherConfiguration,
)
