"""
Faults — неустранимые ошибки исполнения

ExecutionTrap сигнализирует о нарушении внутреннего инварианта, которое
считается невозможным по построению. Вызов прерывается без результата:
ни частичного ответа, ни повторной попытки.

Доменные ошибки (необратимый элемент, переполнение факториала, log2(0),
деление на ноль) сюда НЕ относятся: они выражаются через None или
сентинельные значения и являются обычными результатами.
"""


class ExecutionTrap(Exception):
    """
    Неустранимый сбой вызова.

    Библиотека никогда не перехватывает это исключение. Хост обязан
    трактовать его как полный отказ всего вызова.
    """

    pass


class DirtyWordTrap(ExecutionTrap):
    """
    Ненулевые старшие байты в аргументном слове (только в strict режиме).

    По умолчанию старшие байты игнорируются; strict режим включается через
    DispatcherConfig(strict_words=True).
    """

    def __init__(self, word_index: int, word: bytes):
        self.word_index = word_index
        self.word = word
        super().__init__(f"argument word {word_index} has non-zero high bytes: {word.hex()}")
