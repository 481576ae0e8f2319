"""
Core BigInteger engine: value type, arithmetic primitives, JSON contracts.

Модули core не зависят от внешних систем (консоль, файлы, сеть) и
не используют встроенную длинную арифметику int для многозначных чисел.
"""
