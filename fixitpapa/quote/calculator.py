def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numeric_floor(question):
    return max(1, question.min if question.min is not None else 1)


def calculate_quote(config, answers):
    """
    Estimate a price for a service from the wizard answers.

    Numeric answers are floored at the question minimum (never below 1) and
    multiplied by the question's price per unit. Single-choice answers add the
    matching option's modifier and checkbox answers add the modifier of every
    selected option. A total of exactly zero falls back to the flat base price.
    Negative modifiers are applied as-is; the total is not clamped.
    """
    total = 0

    for question in config.questions:
        answer = answers.get(question.id)

        if question.type == "number" and _is_number(answer):
            count = max(_numeric_floor(question), answer)
            if question.price_per_unit:
                total += question.price_per_unit * count

        elif question.options and isinstance(answer, str):
            option = question.find_option(answer)
            if option and option.price_modifier:
                total += option.price_modifier

        elif question.type == "checkbox" and isinstance(answer, (list, tuple)):
            for value in answer:
                option = question.find_option(value)
                if option and option.price_modifier:
                    total += option.price_modifier

    if total == 0:
        total = config.base_price

    return total
