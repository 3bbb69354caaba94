import numpy as np
import yaml

from raypick.primitives import BoundingBox, Ray


class NumpyToNativeDumper(yaml.SafeDumper):
    """Change Numpy types to native types during YAML encoding

    This inherits from yaml.SafeDumper so that anything that is not
    converted to a basic type will raise an error.

    For instance, np.float128 will raise an error, since it cannot be
    converted to a basic type.

    Rays and bounding boxes are written as mappings of their fields, other
    tuples as lists.
    """

    def represent_data(self, data):
        if isinstance(data, np.ndarray):
            return self.represent_list(data.tolist())
        elif isinstance(data, (np.generic, np.number)):
            item = data.item()
            if isinstance(item, (np.generic, np.number)):
                # This means it was not converted successfully.
                # It is probably np.float128.
                msg = (
                    f'Failed to convert {item} with type {type(item)} to '
                    'a native type'
                )
                raise yaml.representer.RepresenterError(msg)

            return self.represent_data(item)
        elif isinstance(data, Ray):
            return self.represent_dict(data._asdict())
        elif isinstance(data, BoundingBox):
            return self.represent_dict({'min': data.min, 'max': data.max})
        elif isinstance(data, tuple):
            return self.represent_list(list(data))

        return super().represent_data(data)
