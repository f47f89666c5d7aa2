# conf.py

"""
Configuring Octothorpe
~~~~~~~~~~~~~~~~~~~~~~

A handful of package-level options control how Octothorpe objects behave and
how the package logs.

When Octothorpe is imported, it checks for a YAML file named
``octothorpe_config.yml`` in the current directory and automatically loads it
if it exists; otherwise the default configuration is used.

The settings are listed here with their defaults.

    >>> import octothorpe
    >>> defaults = octothorpe.config.defaults()

Settings can be changed on the fly by assigning them a new value:

    >>> octothorpe.config.COPY_ON_DUMP = False

It is also possible to manually load a configuration file:

    >>> octothorpe.config.load_file('octothorpe_config.yml')

Or load a dictionary of configuration values:

    >>> octothorpe.config.load_dict({'STRICT_EQUALITY': True})


The ``config`` API
~~~~~~~~~~~~~~~~~~
"""

# pylint: disable=protected-access

import contextlib
import logging
import logging.config
import pprint
from pathlib import Path

import toolz
import yaml

from . import __about__

log = logging.getLogger(__name__)

_VALID_LOG_LEVELS = [None, "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class ConfigurationError(ValueError):
    pass


class Option:
    """A configuration option, declared as a class attribute of a ``Config``.

    Args:
        default: Value used until the option is set.

    Keyword Args:
        values (list): If given, the only values the option accepts.
        type (type | tuple[type]): If given, the type every value must have.
        on_change (function): Called with the ``Config`` after each change.
        doc (str): Description of the option.

    Setting an invalid value raises ``ConfigurationError`` and keeps the
    previous value.
    """

    def __init__(self, default, values=None, type=None, on_change=None, doc=None):
        self.default = default
        self.values = values
        self.type = type
        self.on_change = on_change
        self.__doc__ = "``default={!r}``\n{}".format(default, doc or "")

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, conf, cls=None):
        if conf is None:
            return self
        return conf._values[self.name]

    def __set__(self, conf, value):
        self.check(value)
        conf._values[self.name] = value
        if self.on_change is not None:
            self.on_change(conf)

    def check(self, value):
        """Raise ``ConfigurationError`` unless ``value`` suits this option."""
        problem = None
        if self.type is not None and not isinstance(value, self.type):
            problem = "expected {}, got {}".format(self.type, type(value).__name__)
        elif self.values is not None and value not in self.values:
            problem = "expected one of {!r}".format(self.values)
        if problem:
            raise ConfigurationError(
                "Invalid value {!r} for {}: {}".format(value, self.name, problem)
            )


class Config:
    """A set of ``Option`` values; see ``OctothorpeConfig``."""

    def __init__(self):
        self._loaded_files = []
        self._values = {}
        for name, opt in self.options().items():
            opt.check(opt.default)
            self._values[name] = opt.default
        # Callbacks run once all defaults are in place, each only once
        hooks = [opt.on_change for opt in self.options().values() if opt.on_change]
        for hook in toolz.unique(hooks):
            hook(self)

    def __repr__(self):
        return pprint.pformat(self._values, indent=2)

    def __setattr__(self, name, value):
        if not name.startswith("_") and name not in self.options():
            raise ConfigurationError(
                "{} is not a config option; options are {}".format(
                    name, ", ".join(self.options())
                )
            )
        super().__setattr__(name, value)

    @classmethod
    def options(cls):
        """Map each option name to its ``Option``."""
        return {
            name: attr
            for klass in reversed(cls.__mro__)
            for name, attr in vars(klass).items()
            if isinstance(attr, Option)
        }

    def defaults(self):
        return {name: opt.default for name, opt in self.options().items()}

    def load_dict(self, dct):
        """Set each option named in ``dct``."""
        for name, value in dct.items():
            setattr(self, name, value)

    def load_file(self, filename):
        """Set options from a YAML file. An empty file sets nothing."""
        path = Path(filename).resolve()
        with path.open(mode="rt") as f:
            self.load_dict(yaml.safe_load(f) or {})
        self._loaded_files.append(path)

    def snapshot(self):
        """Return a copy of the current values."""
        return dict(self._values)

    to_dict = snapshot

    def override(self, **new_values):
        """Temporarily set some options, as a decorator or context manager.

        The overridden options, and any others changed meanwhile, are restored
        afterwards, also when the block raises.

        Example:
            >>> from octothorpe import config
            >>> with config.override(STRICT_EQUALITY=True):
            ...     assert config.STRICT_EQUALITY
            ...
        """
        return _override(self, new_values)

    def diff(self, other):
        """Return ``(mine, theirs)``, the values that differ from ``other``'s.

        Both configurations must have the same options.
        """
        changed = list(toolz.diff(self._values.items(), other.snapshot().items()))
        return (
            dict(mine for mine, _ in changed),
            dict(theirs for _, theirs in changed),
        )


class _override(contextlib.ContextDecorator):
    def __init__(self, conf, new_values):
        self.conf = conf
        self.new_values = new_values
        self.saved = []

    def __enter__(self):
        self.saved.append(self.conf.snapshot())
        self.conf.load_dict(self.new_values)

    def __exit__(self, *exc):
        saved = self.saved.pop()
        current = self.conf.snapshot()
        self.conf.load_dict(
            toolz.keyfilter(
                lambda name: name in self.new_values or current[name] != saved[name],
                saved,
            )
        )
        return False


def configure_logging(conf):
    """Reconfigure the ``octothorpe`` logger from the current configuration."""
    handlers = {}
    if conf.LOG_STDOUT_LEVEL:
        handlers["stdout"] = {
            "level": conf.LOG_STDOUT_LEVEL,
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    if conf.LOG_FILE_LEVEL:
        handlers["file"] = {
            "level": conf.LOG_FILE_LEVEL,
            "filename": str(conf.LOG_FILE),
            "class": "logging.FileHandler",
            "delay": True,
            "formatter": "standard",
        }
    if not handlers:
        handlers["null"] = {"class": "logging.NullHandler"}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
                }
            },
            "handlers": handlers,
            "loggers": {
                __about__.__title__: {
                    "level": "DEBUG",
                    "handlers": list(handlers),
                    "propagate": False,
                },
            },
        }
    )


class OctothorpeConfig(Config):
    """``octothorpe.config`` is an instance of this class."""

    COPY_ON_DUMP = Option(
        True,
        type=bool,
        doc="""
    Controls whether ``Octothorpe.to_dict()`` returns a copy of the underlying
    dictionary. If ``False``, the live dictionary is returned; it is then the
    caller's job not to mutate it.""",
    )

    STRICT_EQUALITY = Option(
        False,
        type=bool,
        doc="""
    By default an ``Octothorpe`` compared with ``==`` to something that cannot
    be read as a mapping is simply not equal to it. If ``True``, such
    comparisons raise ``InvalidSourceError`` instead, in the same way as the
    ordering comparisons (``<``, ``<=``, ``>``, ``>=``) always do.""",
    )

    LOG_FILE = Option(
        "octothorpe.log",
        type=(str, Path),
        on_change=configure_logging,
        doc="""
    Controls the name of the log file.""",
    )

    LOG_FILE_LEVEL = Option(
        None,
        values=_VALID_LOG_LEVELS,
        on_change=configure_logging,
        doc="""
    Controls the level of log messages written to the log file. Takes the same
    values as ``LOG_STDOUT_LEVEL``; ``None`` disables the log file.""",
    )

    LOG_STDOUT_LEVEL = Option(
        "WARNING",
        values=_VALID_LOG_LEVELS,
        on_change=configure_logging,
        doc="""
    Controls the level of log messages written to standard error. Can be one
    of ``'DEBUG'``, ``'INFO'``, ``'WARNING'``, ``'ERROR'``, ``'CRITICAL'``, or
    ``None``. If set to ``None``, logging to the stream is disabled
    entirely.""",
    )

    def log(self):
        """Log current settings."""
        log.info("Octothorpe v%s", __about__.__version__)
        if self._loaded_files:
            log.info("Loaded configuration from %s", self._loaded_files)
        else:
            log.info("Using default configuration (no configuration file provided)")
        log.info("Current Octothorpe configuration:\n %s", str(self))


OCTOTHORPE_USER_CONFIG_PATH = Path("octothorpe_config.yml")

config = OctothorpeConfig()

try:
    config.load_file(OCTOTHORPE_USER_CONFIG_PATH)
except FileNotFoundError:
    pass

config.log()
