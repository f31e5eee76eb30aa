import os
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from oasmodel.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['oasmodel.yaml', 'oasmodel.yml']


class ModelSettings(BaseSettings):
    """Defaults applied when building documents through :mod:`oasmodel.factory`.

    Values come from keyword arguments, then ``OASMODEL_*`` environment
    variables (collections as JSON), then the defaults below.
    """

    model_config = SettingsConfigDict(env_prefix='OASMODEL_', extra='forbid')

    openapi_version: str = Field(
        '3.0.3', description='Version stamped on documents created by the factory.'
    )

    servers: list[str] = Field(
        default_factory=list,
        description='Server URLs replacing the servers of the whole document.',
    )

    path_servers: dict[str, list[str]] = Field(
        default_factory=dict,
        description='Server URLs per path template, replacing the path item servers.',
    )

    operation_servers: dict[str, list[str]] = Field(
        default_factory=dict,
        description='Server URLs per operationId, replacing the operation servers.',
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def _build_settings(data: object, config_path: str) -> ModelSettings:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError('Settings must be a mapping', config_path=config_path)
    try:
        return ModelSettings(**data)
    except ValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc']) or None
        raise ConfigurationError(
            'Invalid settings', config_path=config_path, field=field
        ) from e


def get_settings(path: str | None = None) -> ModelSettings:
    """Load settings from a file, or fall back to the environment.

    Without an explicit path, ``oasmodel.yaml``/``oasmodel.yml`` and then the
    ``[tool.oasmodel]`` table of ``pyproject.toml`` are looked up in the
    current directory.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Settings file not found', config_path=path)
        try:
            data = load_yaml(path)
        except Exception as e:
            raise ConfigurationError(
                f'Could not read settings: {e}', config_path=path
            ) from e
        return _build_settings(data, path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return get_settings(str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(candidate.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f'Could not read settings: {e}', config_path=str(candidate)
            ) from e
        tools = pyproject.get('tool', {})

        if 'oasmodel' in tools:
            return _build_settings(tools['oasmodel'], str(candidate))

    return ModelSettings()
