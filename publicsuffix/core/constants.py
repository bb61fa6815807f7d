"""Constants and built-in data for PublicSuffix."""

# Application metadata
APP_NAME = "publicsuffix"
APP_VERSION = "1.0.0"

# Rule syntax
LABEL_SEPARATOR = "."
WILDCARD_LABEL = "*"
EXCEPTION_PREFIX = "!"
COMMENT_PREFIX = "//"
PRIVATE_SECTION_BEGIN = "===BEGIN PRIVATE DOMAINS==="
PRIVATE_SECTION_END = "===END PRIVATE DOMAINS==="

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Default resolver settings
DEFAULT_SETTINGS = {
    "include_private_domains": True,
    "default_rule": WILDCARD_LABEL,
    "ignore_longer_rules": True,
}

# Fallback rule list used when the caller supplies none.
# Same format as public_suffix_list.dat.
FALLBACK_RULES = """\
// Generic TLDs
com
net
org
edu
gov
mil
int
info
biz

// Country code TLDs and common second levels
uk
co.uk
org.uk
ac.uk
gov.uk
me.uk
ltd.uk
plc.uk
au
com.au
net.au
org.au
edu.au
gov.au
jp
co.jp
ne.jp
or.jp
ac.jp
de
fr
br
com.br
net.br
org.br
in
co.in
nz
co.nz
org.nz
us
ca
cn
com.cn

// ck : wildcard with an exception
*.ck
!www.ck

// kawasaki.jp : wildcard with an exception
*.kawasaki.jp
!city.kawasaki.jp

// bd : every second level is public
*.bd

// Generic new TLDs
io
co
app
dev
ai
me

// Internationalized TLDs
xn--fiqs8s
xn--p1ai
公司.cn

// ===BEGIN PRIVATE DOMAINS===
github.io
gitlab.io
herokuapp.com
blogspot.com
*.compute.amazonaws.com
// ===END PRIVATE DOMAINS===
"""
