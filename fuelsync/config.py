from typing import NamedTuple, Optional, Union, Mapping, Any

import marshmallow as mm
import marshmallow.validate

from .errors import InvalidConfig


DEFAULT_URL = 'https://fuel-testnet.hypersync.xyz'


class ClientConfig(NamedTuple):
    url: str = DEFAULT_URL
    bearer_token: Optional[str] = None
    http_req_timeout_millis: int = 30_000


class _ClientConfigSchema(mm.Schema):
    class Meta:
        unknown = mm.RAISE

    url = mm.fields.Url(require_tld=False, load_default=DEFAULT_URL)
    bearer_token = mm.fields.Str(load_default=None)
    http_req_timeout_millis = mm.fields.Integer(
        strict=True,
        validate=mm.validate.Range(min=1),
        load_default=30_000
    )

    @mm.post_load
    def make_config(self, data, **kwargs):
        return ClientConfig(**data)


_CONFIG_SCHEMA = _ClientConfigSchema()


def parse_config(cfg: Union[ClientConfig, Mapping[str, Any], None]) -> ClientConfig:
    if cfg is None:
        cfg = {}
    elif isinstance(cfg, ClientConfig):
        cfg = cfg._asdict()
    try:
        return _CONFIG_SCHEMA.load(cfg)
    except mm.ValidationError as err:
        raise InvalidConfig('parse config', err) from err
