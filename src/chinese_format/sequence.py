"""
LogogramSequence — упорядоченная последовательность фрагментов

Базовая единица композиции: любая конверсия строит LogogramSequence из
под-последовательностей. Порядок фрагментов = порядок вывода.

Инварианты:
1. Равенство структурное (по фрагментам), а не по итоговой строке
2. to_text(concat(a, b)) == to_text(a) + to_text(b)
3. Пустая последовательность даёт пустую строку
"""

from typing import Final, Iterable, Iterator, Tuple

from pydantic import BaseModel


class Fragment(BaseModel):
    """
    Фрагмент текста: одна или несколько логограмм.

    omissible=True помечает фрагмент, который можно опустить или заменить
    заполнителем (ноль, пустая строка, отсутствующее значение).
    """

    logograms: str
    omissible: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_text(cls, logograms: str) -> "Fragment":
        """Фрагмент из строки; опускаемым считается только пустая строка."""
        return cls(logograms=logograms, omissible=not logograms)

    def __str__(self) -> str:
        return self.logograms


# Заполнитель для отсутствующего значения (None): пустой текст, но фрагмент есть
PLACEHOLDER: Final[Fragment] = Fragment(logograms="", omissible=True)


class LogogramSequence:
    """
    Упорядоченный буфер фрагментов.

    Принадлежит вызывающему коду; concat не изменяет операнды и возвращает
    новую последовательность.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[Fragment] = ()):
        self._fragments = list(fragments)

    @classmethod
    def empty(cls) -> "LogogramSequence":
        return cls()

    @classmethod
    def of(cls, *fragments: Fragment) -> "LogogramSequence":
        return cls(fragments)

    @classmethod
    def from_text(cls, *texts: str) -> "LogogramSequence":
        return cls(Fragment.from_text(text) for text in texts)

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._fragments)

    def push(self, fragment: Fragment) -> None:
        """Добавление фрагмента в конец (in place)."""
        self._fragments.append(fragment)

    def concat(self, other: "LogogramSequence") -> "LogogramSequence":
        """Новая последовательность: фрагменты self, затем фрагменты other."""
        return LogogramSequence(self._fragments + other._fragments)

    def to_text(self) -> str:
        return "".join(fragment.logograms for fragment in self._fragments)

    def is_empty(self) -> bool:
        return not self._fragments

    def is_omissible(self) -> bool:
        """Пустая последовательность или все фрагменты опускаемые."""
        return all(fragment.omissible for fragment in self._fragments)

    def collect(self) -> Fragment:
        """Свёртка в один фрагмент."""
        return Fragment(logograms=self.to_text(), omissible=self.is_omissible())

    def trim_start(self) -> "LogogramSequence":
        """Без ведущей серии опускаемых фрагментов."""
        index = 0
        while index < len(self._fragments) and self._fragments[index].omissible:
            index += 1
        return LogogramSequence(self._fragments[index:])

    def trim_end(self) -> "LogogramSequence":
        """Без хвостовой серии опускаемых фрагментов."""
        end = len(self._fragments)
        while end > 0 and self._fragments[end - 1].omissible:
            end -= 1
        return LogogramSequence(self._fragments[:end])

    def to_chinese(self, context=None) -> "LogogramSequence":
        # Фрагменты уже сконвертированы, контекст не влияет
        return LogogramSequence(self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(tuple(self._fragments))

    def __len__(self) -> int:
        return len(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogogramSequence):
            return NotImplemented
        return self._fragments == other._fragments

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        inner = ", ".join(repr(fragment.logograms) for fragment in self._fragments)
        return f"LogogramSequence([{inner}])"
