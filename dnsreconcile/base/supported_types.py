from typing import Literal


change_actions = Literal["CREATE", "DELETE", "UPSERT"]


failover_roles = Literal["PRIMARY", "SECONDARY"]


# Record types accepted by Route 53 change batches
record_types = Literal[
    "A",
    "AAAA",
    "CAA",
    "CNAME",
    "DS",
    "HTTPS",
    "MX",
    "NAPTR",
    "NS",
    "PTR",
    "SOA",
    "SPF",
    "SRV",
    "SSHFP",
    "SVCB",
    "TLSA",
    "TXT",
]


change_statuses = Literal["unchanged", "changed", "failed"]
