from aiohttp import ClientTimeout
from better_proxy import Proxy
from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.middleware import ExtraDataToPOAMiddleware

from .models import Explorer, NativeCurrency, NetworkInfo


class Chain(AsyncWeb3):
    """Read-only client for one registry network."""
    provider: AsyncHTTPProvider

    def __init__(
            self,
            rpc: str,
            *,
            chain_id: int = None,
            explorers: list[Explorer] = None,
            name: str = None,
            short_name: str = None,
            native_currency: NativeCurrency = None,
            # Connection settings
            provider_timeout: int = 15,
            proxy: str | Proxy = None,
            # Middleware
            use_poa_middleware: bool = True,
    ):
        self.chain_id = chain_id
        self.explorers = explorers or []
        self.name = name
        self.short_name = short_name
        self.native_currency = native_currency or NativeCurrency()

        http_provider = AsyncHTTPProvider(
            rpc,
            request_kwargs={"timeout": ClientTimeout(total=provider_timeout)},
            # Retry policy belongs to the caller
            exception_retry_configuration=None,
        )
        super().__init__(provider=http_provider)

        if use_poa_middleware:
            self.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self._proxy = None
        self.proxy = proxy

    def __str__(self):
        return f"{self.name}"

    def __repr__(self):
        return f"{self.__class__.__name__}(rpc={self.provider.endpoint_uri}, name={self.name})"

    @classmethod
    def from_network(cls, network: NetworkInfo, **chain_kwargs) -> "Chain":
        return cls(
            network.rpc,
            chain_id=network.chain_id,
            explorers=network.explorers,
            name=network.name,
            short_name=network.short_name,
            native_currency=network.native_currency,
            **chain_kwargs,
        )

    @property
    def proxy(self) -> Proxy | None:
        return self._proxy

    @proxy.setter
    def proxy(self, proxy: str | Proxy | None):
        if proxy is None:
            self._proxy = None
            self.provider._request_kwargs.pop("proxy", None)
            return

        if isinstance(proxy, str):
            proxy = Proxy.from_str(proxy)

        self._proxy = proxy
        self.provider._request_kwargs["proxy"] = self._proxy.as_url
