"""Web watcher: HTTP models, executor, configuration, watcher, results."""

from .configuration import Builder, Configurator, WebWatcherConfiguration
from .http import HttpMethod, HttpRequest, HttpResponse, full_url
from .result import WatcherCheckResult, WebWatcherCheckResult
from .service import HttpService, HttpxService
from .watcher import DEFAULT_NAME, WebWatcher
