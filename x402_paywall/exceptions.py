class X402PaywallException(ValueError):
    pass


class ConfigurationError(X402PaywallException):
    pass


class UnsupportedNetwork(X402PaywallException):
    pass


class InvalidContractAddress(X402PaywallException):
    pass


class InvalidPaymentRequirement(X402PaywallException):
    pass


class MissingTokenMetadata(X402PaywallException):
    pass


class ProbeError(X402PaywallException):
    """The capability of a contract could not be determined."""

    def __init__(self, message: str, contract_address: str = None):
        super().__init__(message)
        self.contract_address = contract_address


class RPCRateLimited(ProbeError):
    pass


class NodeStateUnavailable(ProbeError):
    pass


error_msg_to_exception: dict[str, type[ProbeError]] = {
    "rate limit": RPCRateLimited,
    "too many requests": RPCRateLimited,
    "limit exceeded": RPCRateLimited,
    # https://github.com/ethereum/go-ethereum/blob/master/internal/ethapi/api.go
    "header not found": NodeStateUnavailable,
    # Pruned nodes
    "missing trie node": NodeStateUnavailable,
    "state is not available": NodeStateUnavailable,
}


def probe_error_from_message(message: str, contract_address: str = None) -> ProbeError:
    lowered = message.lower()
    for fragment, exception_class in error_msg_to_exception.items():
        if fragment in lowered:
            return exception_class(message, contract_address)
    return ProbeError(message, contract_address)
