"""CLI context holding the configuration and the registry it drives."""

from course_registry.config import RegistryConfig
from course_registry.registry import Registry
from course_registry.sample_data import load_sample_students


class CLIContext:
    """Dependencies for one console session, created by the entry point.

    The registry is built lazily on first access and seeded with the sample
    students when the configuration asks for it.

    Usage:
        ctx = CLIContext(config=RegistryConfig())
        MenuLoop(ctx.registry, sort_students=ctx.config.sort_students).run()
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ):
        """Initialize CLI context.

        Args:
            config: Configuration to use; loaded from the environment if None
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._registry: Registry | None = None

    @property
    def config(self) -> RegistryConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = RegistryConfig.from_env()
        return self._config

    @property
    def registry(self) -> Registry:
        """Get the session registry (lazy-loaded)."""
        if self._registry is None:
            self._registry = Registry()
            if self.config.load_sample_data:
                load_sample_students(self._registry)
        return self._registry
