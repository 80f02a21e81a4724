"""
The strategies to get the fully qualified hostname of the current machine.

The strategies are tried in a fixed order by :mod:`.fqdn`: first, the local
hosts file (:mod:`.hostsfile`), then the system resolver (:mod:`.lookups`).
"""
