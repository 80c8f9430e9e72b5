from mxdirectory.dns.overwrite import ClientDnsOverwrite

__all__ = ["ClientDnsOverwrite"]
