identity = 'http://fault.io/project/python/fault.horology'
name = 'horology'
abstract = 'Millisecond calendar instants and nanosecond durations over a year zero epoch.'
fork = 'chronometry'
icon = '⌛'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
