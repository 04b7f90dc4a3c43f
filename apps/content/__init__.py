"""Content app: footer links, page sections and static pages managed by admins."""
