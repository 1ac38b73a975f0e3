#
#
#

from octodns.provider import ProviderException


class ConstellixException(ProviderException):
    pass


class InvalidArgument(ConstellixException, ValueError):
    pass


class ConstellixHttpException(ConstellixException):
    def __init__(self, status_code, message=None):
        self.status_code = status_code
        super().__init__(message or f'HTTP error {status_code}')


class ConstellixClientNotFound(ConstellixHttpException):
    def __init__(self):
        super().__init__(404, 'Not Found')


class ConstellixClientUnauthorized(ConstellixHttpException):
    def __init__(self):
        super().__init__(401, 'Unauthorized')


class ConstellixClientBadRequest(ConstellixHttpException):
    def __init__(self, status_code, errors=None):
        self.errors = errors or []
        message = 'Bad Request'
        if self.errors:
            message = f'{message}: {"; ".join(str(e) for e in self.errors)}'
        super().__init__(status_code, message)


class ModelNotFoundException(ConstellixException):
    def __init__(self, model_name, model_id):
        self.model_name = model_name
        self.model_id = model_id
        super().__init__(f'No {model_name} found with ID {model_id}')


class ReadOnlyPropertyException(ConstellixException):
    def __init__(self, model_name, prop):
        super().__init__(f'{model_name}.{prop} is read-only')
