# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Orientation provides a small quaternion algebra for representing and manipulating 3D rotations.

The :mod:`.rotations` package contains the functionality.  The free functions in :mod:`.rotations.core` work on plain
numpy arrays while the :class:`.Quaternion` class wraps them in an immutable value type.
"""
