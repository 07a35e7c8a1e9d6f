"""userhub: user accounts and authentication over a document store and a relational mirror."""
