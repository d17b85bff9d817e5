import os
import yaml
from copy import deepcopy
import logging


class Parameters:
    """Global parameters module

    Parameters are defined in the parameters.yml file ONLY, and are organized in the following groups:

    * system
    * gtfs

    .. code-block:: python

        >>> from transit_calendar import Parameters

        >>> p = Parameters("/tmp/my_analysis")

        >>> p.parameters['system']['logging_directory'] =  "/tmp/other_folder"
        >>> p.parameters['gtfs']['strict_time_parsing'] = True
        >>> p.write_back()

        >>> # You can also restore the software default values
        >>> p.restore_default()
    """

    _default: dict
    file_default: str

    def __init__(self, path: str = None):
        """Loads parameters from the parameters.yml file in *path* (the working directory if not given), or the
        package defaults if there is none"""
        self.file = os.path.join(path or "", "parameters.yml")

        if os.path.isfile(self.file):
            with open(self.file, "r") as yml:
                self.parameters = yaml.load(yml, Loader=yaml.SafeLoader)
        else:
            if path is not None:
                logger = logging.getLogger("transit_calendar")
                logger.warning("No pre-existing parameter file exists for this folder. Will use default")

            self.parameters = deepcopy(self._default)

    def write_back(self):
        """Writes the parameters back to file"""
        with open(self.file, "w") as stream:
            yaml.dump(self.parameters, stream, default_flow_style=False)

    def restore_default(self):
        """Restores parameters to generic default"""
        self.parameters = deepcopy(self._default)
        self.write_back()


Parameters.file_default = os.path.join(os.path.dirname(os.path.realpath(__file__)), "parameters.yml")
with open(Parameters.file_default, "r") as yml:
    Parameters._default = yaml.safe_load(yml)
