# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Custom exceptions for the descriptor constraints validator."""


class DescriptorConstraintsError(Exception):
    """Base exception for descriptor-constraints related errors."""
    pass


class SchemaDefinitionError(DescriptorConstraintsError):
    """Exception raised when a constraint tree is malformed."""
    pass


class DescriptorLoadError(DescriptorConstraintsError):
    """Exception raised when a descriptor file cannot be read or decoded."""
    pass


class ValidationError(DescriptorConstraintsError):
    """Exception raised for the first constraint violation found in a record.

    Attributes:
        message: Human-readable description of the violation
        path: Root-anchored location of the violation, e.g. ``$.microservices[0].name``
    """

    def __init__(self, message: str, path: str):
        super().__init__(message, path)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f"{self.message}\nPath: {self.path}"


class RequiredFieldError(ValidationError):
    """Exception raised when a required field is absent or null."""
    pass


class FieldTypeError(ValidationError):
    """Exception raised when a value does not have the expected shape."""
    pass


class FieldValueError(ValidationError):
    """Exception raised when a correctly shaped value is rejected by a validator."""
    pass


class DependencyError(ValidationError):
    """Exception raised when a sibling field does not satisfy a dependency rule."""

    def __init__(self, message: str, path: str, field: str, depends_on: str):
        super().__init__(message, path)
        self.field = field
        self.depends_on = depends_on

    def __reduce__(self):
        return (type(self), (self.message, self.path, self.field, self.depends_on))


class NestingDepthError(ValidationError):
    """Exception raised when the data tree is nested deeper than allowed."""
    pass
