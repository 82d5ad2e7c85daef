class ClawClaimError(Exception):
    pass


class RegistryError(ClawClaimError):
    pass


class UnsupportedProtocolError(ClawClaimError):
    pass
