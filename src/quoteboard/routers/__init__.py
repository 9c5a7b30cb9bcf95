# This file marks the routers package for board route modules.
# It exists so import paths stay clear when registering route groups.
