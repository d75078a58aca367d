from rdflib import Namespace

SPDX_PROVIDER_ID = "spdx"

# Index page, detail-page base, and root entity of the snapshot.
LICENSE_LIST_URL = "https://spdx.org/licenses/"

SPDX_TERMS = Namespace("http://spdx.org/rdf/terms#")
LICENSE_ID = SPDX_TERMS.licenseId
LICENSE_LIST_VERSION = SPDX_TERMS.licenseListVersion
LICENSE = SPDX_TERMS.license

DEFAULT_THROTTLE_SECONDS = 1.0
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = "license-harvester/0.1"
