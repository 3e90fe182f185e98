"""
Shared constants for the chunk splitting engine and server.
"""

# File names
OPTIONS_FILE = "chunk-split.json"
MANIFEST_FILE = "package.json"

# Reserved chunk name for unmatched third-party modules
FALLBACK_CHUNK = "vendor"

# Dependencies that only ship type declarations are never split
TYPES_ONLY_PREFIX = "@types/"

DEFAULT_STRATEGY = "balanced"
DEFAULT_MIN_SIZE_KB = 50

# Common large libraries that should typically be split
COMMON_LARGE_LIBS = {
    # UI frameworks
    'react': ['react', 'react-dom'],
    'vue': ['vue', '@vue/'],
    'angular': ['@angular/'],
    'svelte': ['svelte'],

    # State management
    'redux': ['redux', 'react-redux', '@reduxjs/toolkit'],
    'mobx': ['mobx', 'mobx-react'],
    'zustand': ['zustand'],
    'pinia': ['pinia'],

    # Routing
    'react-router': ['react-router', 'react-router-dom'],
    'vue-router': ['vue-router'],

    # UI libraries
    'antd': ['antd', '@ant-design/'],
    'element-plus': ['element-plus'],
    'element-ui': ['element-ui'],
    'naive-ui': ['naive-ui'],
    'arco-design': ['@arco-design/'],
    'material-ui': ['@mui/', '@material-ui/'],
    'chakra': ['@chakra-ui/'],

    # Utility libraries
    'lodash': ['lodash', 'lodash-es'],
    'moment': ['moment'],
    'dayjs': ['dayjs'],
    'axios': ['axios'],

    # Rich text / charts
    'echarts': ['echarts'],
    'd3': ['d3'],
    'chart.js': ['chart.js'],
    'quill': ['quill'],

    # 3D / game
    'three': ['three'],
    'babylon': ['@babylonjs/'],
}

# Medium-sized libraries that are grouped together
MEDIUM_LIB_GROUPS = {
    'utils': ['@vueuse/', 'ahooks', 'react-use'],
    'icons': ['@iconify/', '@ant-design/icons', '@heroicons/', 'lucide-react'],
    'form': ['react-hook-form', 'formik', 'async-validator'],
    'i18n': ['i18next', 'react-i18next', 'vue-i18n'],
}

# Large presets considered big enough for the conservative strategy
VERY_LARGE_LIBS = ('react', 'vue', 'angular', 'antd', 'element-plus', 'echarts', 'three')

# Host plugin names -> framework hint token
FRAMEWORK_HINT_PLUGINS = {
    'vite:vue': 'vue',
    'vite:vue-jsx': 'vue',
    'unplugin-vue-components': 'vueuse',
}

# Hint token -> (group name, package patterns), in detection order
HINT_GROUPS = {
    'vue': ('vue', ['vue', '@vue/']),
    'vueuse': ('vueuse', ['@vueuse/']),
}

STRATEGY_DESCRIPTIONS = {
    'aggressive': 'Aggressive (split most dependencies)',
    'balanced': 'Balanced (split large libraries)',
    'conservative': 'Conservative (minimal splitting)',
}

# Output file-name templates
ENTRY_FILE_NAMES = "js/[name]-[hash].js"
CHUNK_FILE_NAMES = "js/[name]-[hash].js"

ASSET_DIRECTORIES = {
    'css': {'css'},
    'img': {'png', 'jpg', 'jpeg', 'gif', 'svg', 'webp', 'avif'},
    'fonts': {'woff', 'woff2', 'eot', 'ttf', 'otf'},
}
DEFAULT_ASSET_DIRECTORY = "assets"
ASSET_FILE_TEMPLATE = "{directory}/[name]-[hash][extname]"
