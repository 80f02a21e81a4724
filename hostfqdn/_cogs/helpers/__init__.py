"""
General-purpose helpers not related to the FQDN resolution itself
(neither to the resolution strategies nor to the engines nor to the configs),
which are used to read and validate the raw inputs.

These are things that should better be in the standard library
or in the dependencies.

As a rule of thumb, helpers MUST be abstracted from the resolution
to such an extent that they could be extracted as reusable libraries.
If they implement the resolution concepts, they are not "helpers"
(consider making them configs, engines, or the resolution parts).
"""
