# config.py

import os


class ConfigError(ValueError):
    """Raised when the graph configuration cannot produce a valid graph."""


class Config:
    """Global configuration loaded from ``input/config.json``.

    Attributes
    ----------
    variant:
        Seed used for the pseudo-random generator. Graph generation is a pure
        function of this value, :attr:`n` and :attr:`density`.
    config_vector:
        Small integer vector from which :attr:`n` and :attr:`density` are
        derived by :meth:`derive`.
    n:
        Number of nodes in the generated graph.
    density:
        Edge probability coefficient in ``[0, 1]``. Entry ``(i, j)`` is set
        when ``random() * 2 * density >= 1``.
    directed:
        Initial interpretation of the adjacency matrix. The running value is
        held by :class:`~Circle_Graph.app.GraphApp`.
    log_level:
        Level passed to :func:`logging.basicConfig` by the CLI.
    log_traversal:
        When ``True`` traversal events are appended to JSON lines files under
        :attr:`output_dir`.
    log_files:
        Mapping of ``category`` -> {``label``: bool} controlling which trace
        records are written.
    """

    # Base directories for package resources
    base_dir = os.path.abspath(os.path.dirname(__file__))
    input_dir = os.path.join(base_dir, "input")
    config_file = os.path.join(input_dir, "config.json")
    output_dir = os.path.join(base_dir, "output")

    @staticmethod
    def input_path(*parts: str) -> str:
        """Return absolute path under the ``input`` directory."""
        return os.path.join(Config.input_dir, *parts)

    variant = 3106
    config_vector = [0, 3, 1, 0, 6]
    seed = variant
    n = 10
    density = 0.82

    #: Initial traversal mode
    directed = True

    log_level = "WARNING"
    log_traversal = False

    DEFAULT_LOG_FILES = {
        "event": {
            "search_reset": True,
            "node_visited": True,
            "component_seeded": True,
            "search_exhausted": True,
            "mode_toggled": True,
        },
    }

    # Default runtime copy
    log_files = {k: dict(v) for k, v in DEFAULT_LOG_FILES.items()}

    @classmethod
    def derive(cls, vector: list[int] | None = None) -> tuple[int, float]:
        """Return ``(n, density)`` derived from ``vector``.

        ``n`` is ``vector[3] + 10`` and ``density`` is
        ``1 - vector[3] * 0.01 - vector[4] * 0.005 - 0.15``.
        """

        vec = list(cls.config_vector if vector is None else vector)
        if len(vec) < 5:
            raise ConfigError(
                f"config_vector needs at least 5 entries, got {len(vec)}"
            )
        n = int(vec[3]) + 10
        density = 1.0 - vec[3] * 0.01 - vec[4] * 0.005 - 0.15
        return n, density

    @classmethod
    def apply_vector(cls, vector: list[int] | None = None) -> None:
        """Set :attr:`n` and :attr:`density` from ``vector``."""

        if vector is not None:
            cls.config_vector = list(vector)
        cls.n, cls.density = cls.derive()
        cls.validate()

    @classmethod
    def validate(cls) -> None:
        """Raise :class:`ConfigError` if the current values are unusable."""

        validate_graph_params(cls.n, cls.density)

    @classmethod
    def is_log_enabled(cls, category: str, label: str | None = None) -> bool:
        """Return ``True`` if a trace record should be written."""

        if not cls.log_traversal:
            return False
        cfg = cls.log_files.get(category, {})
        if label is not None and not cfg.get(label, True):
            return False
        return True

    @classmethod
    def load_from_file(cls, path: str) -> None:
        """Load configuration values from a JSON file.

        Only keys that already exist as attributes on ``Config`` will be
        assigned. Nested dictionaries are merged recursively when the existing
        attribute is also a ``dict``. A ``config_vector`` entry re-derives
        :attr:`n` and :attr:`density` unless those keys are given explicitly.
        A ``variant`` entry also sets :attr:`seed` unless ``seed`` is given.

        Parameters
        ----------
        path:
            Path to the JSON configuration file.
        """
        import json

        if not os.path.exists(path):
            raise FileNotFoundError(path)
        with open(path) as f:
            data = json.load(f)
        cls.config_file = os.path.abspath(path)
        base_dir = os.path.dirname(cls.config_file)

        if "config_vector" in data:
            cls.config_vector = list(data["config_vector"])
            cls.n, cls.density = cls.derive()
        if "variant" in data and "seed" not in data:
            cls.seed = int(data["variant"])

        for key, value in data.items():
            if not hasattr(cls, key) or key == "config_vector":
                continue
            if key == "output_dir" and not os.path.isabs(value):
                value = os.path.abspath(os.path.join(base_dir, value))
            current = getattr(cls, key)
            if isinstance(current, dict) and isinstance(value, dict):
                for sub, sub_value in value.items():
                    if isinstance(current.get(sub), dict) and isinstance(
                        sub_value, dict
                    ):
                        current[sub].update(sub_value)
                    else:
                        current[sub] = sub_value
            else:
                setattr(cls, key, value)

        cls.validate()


def validate_graph_params(n: int, density: float) -> None:
    """Raise :class:`ConfigError` unless ``n > 0`` and ``0 <= density <= 1``."""

    if n <= 0:
        raise ConfigError(f"node count must be positive, got {n}")
    if not 0.0 <= density <= 1.0:
        raise ConfigError(f"density must lie in [0, 1], got {density}")


def load_config(path: str | None = None) -> dict:
    """Load configuration from ``path`` and return the data."""
    if path is None:
        path = Config.input_path("config.json")
    Config.load_from_file(path)
    Config.config_file = os.path.abspath(path)
    import json

    with open(path) as f:
        return json.load(f)


Config.n, Config.density = Config.derive()
