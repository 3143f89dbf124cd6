class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値がドメインの制約を満たさない場合（副作用の前に検出される）"""

    pass


class InvalidFareClass(ValidationException):
    """運賃クラスが定義済みの値ではない場合"""

    pass


class InvalidTicketCount(ValidationException):
    """チケット枚数が正の整数ではない場合"""

    pass


class InvalidPassengerName(ValidationException):
    """搭乗者名が空、または長すぎる場合"""

    pass
