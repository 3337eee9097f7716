class ConfigurationError(Exception):
    """ Raised when credentials or region cannot be resolved before signing """
    pass
