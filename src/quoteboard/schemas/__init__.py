# This file marks the schemas package for board response models.
# It exists so schema modules can be imported as one coherent namespace.
