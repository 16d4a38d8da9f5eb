from ordered_jobs.job import parse_jobs
from ordered_jobs.sorter import render_order, sort_jobs


def order_jobs(text: str, separator: str = "") -> str:
    """
    Parse job declarations and return their names in execution order.

    :param text: One job declaration per line
    :type text: str
    :param separator: Text placed between job names
    :type separator: str
    :return: Rendered execution order, e.g. ``"afcbde"``
    :rtype: str
    """
    return render_order(sort_jobs(parse_jobs(text)), separator)
