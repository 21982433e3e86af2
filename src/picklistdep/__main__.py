'''
picklistdep のエントリーポイント
`python -m picklistdep` で CLI を起動する
'''

from picklistdep.cli.main import main

raise SystemExit(main())
