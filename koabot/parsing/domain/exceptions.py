"""
Исключения для домена Parsing.

Ошибки разбора строк товаров. Сообщения показываются пользователю бота
как есть (на испанском, с примером правильного ввода).
"""

from typing import Optional


ACCEPTED_FORMATS_HINT = (
    '• "REF; nombre; cantidad; unidad" (ej: "ABC123; Tomate; 10; kg")\n'
    '• "nombre cantidad unidad" (ej: "Tomate 10 kg")\n'
    '• "cantidad unidad nombre" (ej: "10 kg Tomate")\n'
    '• "REF nombre cantidad unidad" (ej: "PAN010 Pan burger 12 ud")'
)


class ParsingError(Exception):
    """Базовое исключение для ошибок домена Parsing."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        # Сообщение уходит пользователю без технических деталей
        return self.message

    def describe(self) -> str:
        """Полное описание для логов."""
        msg = f"Parsing Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ParsingConfigurationError(ParsingError):
    """Ошибка конфигурации домена Parsing (локаль, словари)."""
    pass


class ItemLineError(ParsingError):
    """Ошибка разбора одной строки товара."""

    field: Optional[str] = None

    def __init__(self, message: str, line: Optional[str] = None, component: str = None):
        self.line = line
        super().__init__(message, component=component)


class EmptyLineError(ItemLineError):
    """Пустая строка."""

    def __init__(self, line: Optional[str] = None):
        super().__init__(
            'Línea vacía. Formato esperado: "REF; nombre; cantidad; unidad" o "nombre cantidad unidad"',
            line=line,
        )


class TooFewFieldsError(ItemLineError):
    """Формат с разделителями, но меньше трех полей."""

    def __init__(self, line: Optional[str] = None):
        super().__init__(
            'Formato inválido. Usa "REF; nombre; cantidad; unidad" o "nombre cantidad unidad". '
            'Ejemplo: "ABC123; Tomate; 10; kg" o "Tomate 10 kg"',
            line=line,
        )


class MissingProductError(ItemLineError):
    """Название товара пустое после разбора."""

    field = "product"

    def __init__(self, line: Optional[str] = None):
        super().__init__(
            "No se pudo identificar el nombre del producto. El nombre del producto es obligatorio.",
            line=line,
        )


class InvalidQuantityError(ItemLineError):
    """Количество не распознано как число."""

    field = "quantity"

    def __init__(self, token: Optional[str] = None, line: Optional[str] = None, message: Optional[str] = None):
        self.token = token
        if message is None:
            shown = f': "{token}"' if token else ""
            message = f'Cantidad inválida{shown}. Usa un número decimal, por ejemplo "10" o "2,5".'
        super().__init__(message, line=line)


class QuantityPrecisionError(InvalidQuantityError):
    """Слишком много знаков после запятой."""

    def __init__(self, token: Optional[str] = None, max_decimal_places: int = 3, line: Optional[str] = None):
        self.max_decimal_places = max_decimal_places
        super().__init__(
            token=token,
            line=line,
            message=(
                f'Cantidad inválida: "{token}". '
                f"Usa como máximo {max_decimal_places} decimales, por ejemplo \"0,125\"."
            ),
        )


class InvalidUnitError(ItemLineError):
    """Единица измерения не из закрытого набора."""

    field = "unit"

    def __init__(self, token: Optional[str] = None, line: Optional[str] = None):
        self.token = token
        shown = f': "{token}"' if token else ""
        super().__init__(
            f'Unidad inválida{shown}. Usa "ud", "kg" o "L". '
            'Ejemplo: "ABC123; Tomate; 10; kg" o "Tomate 10 kg".',
            line=line,
        )


class UnrecognizedFormatError(ItemLineError):
    """Ни одна грамматика не подошла."""

    def __init__(self, line: Optional[str] = None):
        super().__init__(
            "Formato no reconocido. Usa uno de estos formatos:\n" + ACCEPTED_FORMATS_HINT,
            line=line,
        )


class ItemBatchError(ParsingError):
    """Ошибка в одной из строк многострочного сообщения (первая ошибка прерывает партию)."""

    def __init__(self, line_number: int, line: str, cause: ItemLineError):
        self.line_number = line_number
        self.line = line
        self.cause = cause
        super().__init__(
            f'Error al parsear la línea {line_number}: "{line}"\n{cause.message}',
            component="ItemBatchParser",
            original_error=cause,
        )


class EmptyBatchError(ParsingError):
    """В сообщении нет ни одной строки товара."""

    def __init__(self):
        super().__init__("No se encontraron items válidos. Intenta de nuevo.", component="ItemBatchParser")
